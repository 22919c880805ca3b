# journals/views.py
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from accounts.serializers.user_serializers import AppUserSerializer
from .exceptions import ValidationError
from .serializers import (
    JournalInputSerializer,
    JournalSerializer,
    SearchQuerySerializer,
    SearchResultSerializer,
)
from .services import JournalService


def _request_body(request) -> dict:
    # JSON 배열 등 객체가 아닌 body 는 400
    data = request.data
    if not data:
        return {}
    if not isinstance(data, dict):
        raise ValidationError({"non_field_errors": ["Request body must be a JSON object."]})
    return data


class JournalViewSet(viewsets.ViewSet):
    """
    실제 로직은 전부 JournalService 에 있다.
    도메인 에러(NotFound/NotOwned/Validation/ReportGeneration)는 APIException 이라
    DRF exception handler 가 상태코드를 붙여서 응답한다.
    """
    permission_classes = [IsAuthenticated]
    lookup_value_regex = "[^/]+"

    def get_service(self):
        return JournalService()

    @extend_schema(responses=JournalSerializer(many=True))
    def list(self, request):
        journals = self.get_service().list_entries(request.user)
        return Response(JournalSerializer(journals, many=True).data)

    @extend_schema(responses=JournalSerializer)
    def retrieve(self, request, pk=None):
        journal = self.get_service().get_entry(request.user, pk)
        return Response(JournalSerializer(journal).data)

    @extend_schema(request=JournalInputSerializer, responses={201: JournalSerializer})
    def create(self, request):
        data = _request_body(request)
        journal = self.get_service().create_entry(
            request.user,
            title=data.get("title"),
            description=data.get("description"),
        )
        return Response(JournalSerializer(journal).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=JournalInputSerializer, responses=JournalSerializer)
    def update(self, request, pk=None):
        data = _request_body(request)
        journal = self.get_service().update_entry(
            request.user,
            pk,
            title=data.get("title"),
            description=data.get("description"),
        )
        return Response(JournalSerializer(journal).data)

    def partial_update(self, request, pk=None):
        # title/description 둘 다 필요 (요약을 다시 계산하므로 부분 수정 없음)
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        self.get_service().delete_entry(request.user, pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses=AppUserSerializer)
    @action(detail=False, methods=["POST"], url_path="weekly-report")
    def weekly_report(self, request):
        user = self.get_service().generate_weekly_report(request.user)
        return Response(AppUserSerializer(user).data)

    @extend_schema(request=SearchQuerySerializer, responses=SearchResultSerializer(many=True))
    @action(detail=False, methods=["POST"])
    def search(self, request):
        query = _request_body(request).get("query", "")
        results = self.get_service().search_entries(request.user, query)

        if query == "":
            # 빈 검색어: 점수 없이 전체 목록
            return Response(JournalSerializer(results, many=True).data)
        return Response(SearchResultSerializer(results, many=True).data)
