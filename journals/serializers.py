# journals/serializers.py
from rest_framework import serializers
from .models import Journal, TITLE_MAX_LENGTH

SEARCH_QUERY_MAX_LENGTH = 100


class JournalInputSerializer(serializers.Serializer):
    """create / update 공통 입력 검증"""
    title = serializers.CharField(min_length=1, max_length=TITLE_MAX_LENGTH, trim_whitespace=False)
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)


class SearchQuerySerializer(serializers.Serializer):
    query = serializers.CharField(allow_blank=True, max_length=SEARCH_QUERY_MAX_LENGTH, trim_whitespace=False)


class JournalSerializer(serializers.ModelSerializer):
    class Meta:
        model = Journal
        fields = ["id", "user", "title", "description", "summary", "created_at", "updated_at"]
        read_only_fields = fields


class SearchResultSerializer(serializers.Serializer):
    """검색 결과: summary 는 bullet 리스트로 쪼개서 내려준다"""
    id = serializers.UUIDField(source="journal.id")
    user = serializers.IntegerField(source="journal.user_id")
    title = serializers.CharField(source="journal.title")
    description = serializers.CharField(source="journal.description")
    summary = serializers.ListField(source="bullets", child=serializers.CharField())
    similarity = serializers.FloatField()
    created_at = serializers.DateTimeField(source="journal.created_at")
    updated_at = serializers.DateTimeField(source="journal.updated_at")
