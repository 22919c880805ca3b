"""
Journal 서비스: 저장소 CRUD + 소유권 확인 + 외부 AI 호출 조립.

흐름: 소유권 확인 -> 저장소 작업 -> (필요하면) 외부 AI 호출 -> 결과
요약 실패는 원문으로 대체 (사용자에게 안 보임), 주간 리포트 실패는 그대로 전파.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from django.conf import settings

from .exceptions import ReportGenerationError, ValidationError
from .helpers import format_report_date, get_week_bounds, parse_summary
from .integrations import openai_clients
from .integrations.openai_clients import SummaryResult
from .models import Journal
from .ownership import require_journal_ownership
from .serializers import JournalInputSerializer, SearchQuerySerializer
from .similarity import cosine_similarity

logger = logging.getLogger(__name__)

JOURNAL_LINE_TEMPLATE = "Journal Title: {title} - Journal Summary: {summary} - Created Date: {date}"
JOURNAL_SEPARATOR = "; "
WEEKLY_REPORT_PROMPT = (
    "Please make an overview of what has happened over the week and give me "
    "encouraging statements to uplift my spirts. The following are the journals "
    "that have been created this week: {summaries}."
)


@dataclass(frozen=True)
class SearchResult:
    journal: Journal
    similarity: float
    bullets: List[str]


def build_weekly_prompt(journals) -> str:
    summaries = JOURNAL_SEPARATOR.join(
        JOURNAL_LINE_TEMPLATE.format(
            title=j.title,
            summary=j.summary,
            date=format_report_date(j.created_at),
        )
        for j in journals
    )
    return WEEKLY_REPORT_PROMPT.format(summaries=summaries)


def _validate(serializer_class, **data) -> dict:
    ser = serializer_class(data=data)
    if not ser.is_valid():
        raise ValidationError(ser.errors)
    return ser.validated_data


class JournalService:
    def __init__(
        self,
        summarizer: Optional[Callable[[str], SummaryResult]] = None,
        chat: Optional[Callable[[str], str]] = None,
    ):
        # 테스트에서 어댑터 주입 가능. 기본값은 호출 시점에 모듈에서 찾는다 (patch 가능)
        self._summarizer = summarizer
        self._chat = chat

    def summarize(self, text: str) -> SummaryResult:
        fn = self._summarizer or openai_clients.summarize
        return fn(text)

    def ask_chat(self, prompt: str) -> str:
        fn = self._chat or openai_clients.ask_chat
        return fn(prompt)

    # ---- summary ----

    def compute_summary(self, description: str) -> str:
        if not description.strip():
            return description

        try:
            result = self.summarize(description)
        except Exception as e:
            # 주입된 어댑터가 예외를 던져도 원문 대체
            logger.warning(f"[summary] summarizer raised {type(e).__name__}, falling back to description")
            return description

        if result.ok:
            return result.summary

        logger.warning(f"[summary] falling back to description ({result.failure.reason})")
        return description

    # ---- CRUD ----

    def list_entries(self, user) -> List[Journal]:
        return list(Journal.objects.filter(user=user))

    def get_entry(self, user, journal_id) -> Optional[Journal]:
        if not journal_id:
            return None
        return require_journal_ownership(user, journal_id)

    def create_entry(self, user, title: str, description: str) -> Journal:
        data = _validate(JournalInputSerializer, title=title, description=description)
        summary = self.compute_summary(data["description"])

        journal = Journal.objects.create(
            user=user,
            title=data["title"],
            description=data["description"],
            summary=summary,
        )
        logger.info(f"[journal] created {journal.id} (user={user.id})")
        return journal

    def update_entry(self, user, journal_id, title: str, description: str) -> Journal:
        journal = require_journal_ownership(user, journal_id)
        data = _validate(JournalInputSerializer, title=title, description=description)
        summary = self.compute_summary(data["description"])

        journal.title = data["title"]
        journal.description = data["description"]
        journal.summary = summary
        journal.save(update_fields=["title", "description", "summary", "updated_at"])
        logger.info(f"[journal] updated {journal.id} (user={user.id})")
        return journal

    def delete_entry(self, user, journal_id) -> None:
        journal = require_journal_ownership(user, journal_id)
        deleted_id = journal.id
        journal.delete()
        logger.info(f"[journal] deleted {deleted_id} (user={user.id})")

    # ---- weekly report ----

    def generate_weekly_report(self, user):
        start, end = get_week_bounds()
        journals = Journal.objects.filter(user=user, created_at__gte=start, created_at__lte=end)
        prompt = build_weekly_prompt(journals)

        try:
            report = self.ask_chat(prompt)
        except ReportGenerationError:
            # 이전 리포트는 그대로 둔다
            logger.exception(f"[weekly-report] generation failed (user={user.id})")
            raise
        except Exception as e:
            logger.exception(f"[weekly-report] generation failed (user={user.id})")
            raise ReportGenerationError(f"Unexpected chat failure: {type(e).__name__}") from e

        user.weekly_report = report
        user.save(update_fields=["weekly_report"])
        return user

    # ---- search ----

    def search_entries(self, user, query: str) -> Union[List[Journal], List[SearchResult]]:
        query = _validate(SearchQuerySerializer, query=query)["query"]
        journals = self.list_entries(user)
        if query == "":
            return journals

        threshold = settings.COSINE_SIMILARITY_THRESHOLD
        results = []
        for journal in journals:
            similarity = cosine_similarity(query, journal.summary)
            if similarity > threshold:
                results.append(SearchResult(journal, similarity, parse_summary(journal.summary)))
        return results
