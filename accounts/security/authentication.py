import logging

from rest_framework.authentication import BaseAuthentication
from rest_framework import exceptions
from .app_jwt import verify_app_jwt
from ..models import AppUser

logger = logging.getLogger(__name__)


class AppJWTAuthentication(BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request):
        # 1) Authorization 헤더 없으면 패스 (permission 단계에서 401)
        auth = request.META.get("HTTP_AUTHORIZATION", "")
        if not auth:
            return None

        # 2) Bearer 토큰 형태 아니면 패스
        if not auth.lower().startswith("bearer "):
            return None

        token = auth.split(" ", 1)[1].strip()
        if not token:
            raise exceptions.AuthenticationFailed("Empty token")

        # 3) 토큰 검증
        try:
            payload = verify_app_jwt(token)
        except Exception:
            logger.info("[auth] rejected bearer token")
            raise exceptions.AuthenticationFailed("Invalid token")

        # 4) sub(=AppUser pk) 로 유저 조회
        user_id = payload.get("sub")
        user = AppUser.objects.filter(id=user_id).first() if user_id and str(user_id).isdigit() else None

        if not user:
            # 토큰은 맞았는데 DB에 유저가 없는 케이스
            raise exceptions.AuthenticationFailed("User not found")

        return (user, None)

    def authenticate_header(self, request):
        # 이게 있어야 NotAuthenticated 가 403 대신 401 로 나감
        return self.keyword
