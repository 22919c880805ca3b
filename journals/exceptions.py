"""
journals 도메인 에러.

APIException 을 상속해서 DRF 기본 exception handler 가 그대로 응답을 만든다.
SummarizationFailure 만 예외가 아니라 값(value)이다. 요약 실패는 항상 원문으로
대체되고 클라이언트까지 올라가지 않는다.
"""
from __future__ import annotations

from dataclasses import dataclass

from rest_framework import exceptions, status


class NotFoundError(exceptions.APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Journal not found."
    default_code = "journal_not_found"


class NotOwnedError(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not own this journal."
    default_code = "journal_not_owned"


class ValidationError(exceptions.ValidationError):
    pass


class ReportGenerationError(exceptions.APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Weekly report could not be generated."
    default_code = "report_generation_failed"


class ReportTimeoutError(ReportGenerationError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    default_detail = "Weekly report generation timed out."
    default_code = "report_timeout"


@dataclass(frozen=True)
class SummarizationFailure:
    reason: str  # "timeout" | "api_error" | "empty_response" | "unexpected"
    detail: str = ""
