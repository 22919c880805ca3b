# accounts/views/user_views.py
from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from accounts.serializers.user_serializers import AppUserSerializer


class MeView(APIView):
    @extend_schema(responses=AppUserSerializer)
    def get(self, request):
        """현재 유저 + 캐시된 주간 리포트"""
        return Response(AppUserSerializer(request.user).data, status=200)
