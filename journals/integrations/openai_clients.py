from __future__ import annotations
import os, logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
from openai import OpenAI, OpenAIError, APITimeoutError

from journals.exceptions import ReportGenerationError, ReportTimeoutError, SummarizationFailure

logger = logging.getLogger(__name__)

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
OPENAI_SUMMARY_MODEL = os.getenv("OPENAI_SUMMARY_MODEL", OPENAI_MODEL)
OPENAI_TIMEOUT = int(os.getenv("OPENAI_TIMEOUT", "20"))


@lru_cache(maxsize=1)
def get_client() -> OpenAI:
    # OPENAI_API_KEY 없으면 여기서 OpenAIError. import 시점이 아니라 첫 호출 시점에 터지게
    # max_retries=0: 재시도 없음, 실패하면 바로 호출자에게
    return OpenAI(timeout=OPENAI_TIMEOUT, max_retries=0)


@dataclass(frozen=True)
class SummaryOptions:
    length: str = "auto"
    format: str = "bullets"
    model: str = OPENAI_SUMMARY_MODEL
    temperature: float = 0.3
    additional_command: str = ""


DEFAULT_SUMMARY_OPTIONS = SummaryOptions()


@dataclass(frozen=True)
class SummaryResult:
    """
    요약 어댑터의 결과. 성공(summary) / 실패(failure) 둘 중 하나만 채워진다.
    실패 시 원문으로 대체할지는 호출자(JournalService)가 결정한다.
    """
    summary: Optional[str] = None
    failure: Optional[SummarizationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, summary: str) -> "SummaryResult":
        return cls(summary=summary)

    @classmethod
    def failed(cls, reason: str, detail: str = "") -> "SummaryResult":
        return cls(failure=SummarizationFailure(reason=reason, detail=detail))


def build_summary_instruction(options: SummaryOptions) -> str:
    length_line = {
        "auto": "Choose the summary length that fits the text.",
        "short": "Keep the summary very short (1-2 bullets).",
        "medium": "Keep the summary to about 3-5 bullets.",
        "long": "Write a detailed summary (up to 10 bullets).",
    }.get(options.length, "Choose the summary length that fits the text.")

    if options.format == "bullets":
        format_line = (
            'Format the summary as bullet points. Start every bullet with "- " '
            "and do not use the \"-\" character anywhere else."
        )
    else:
        format_line = "Format the summary as a single paragraph."

    lines = [
        "You summarize personal journal entries.",
        length_line,
        format_line,
        "Respond with the summary only.",
    ]
    if options.additional_command:
        lines.append(options.additional_command)
    return "\n".join(lines)


def summarize(text: str, options: SummaryOptions = DEFAULT_SUMMARY_OPTIONS) -> SummaryResult:
    """
    text 를 bullet 요약. 예외를 밖으로 던지지 않는다.
    timeout / 인증 / 쿼터 / 빈 응답 모두 SummaryResult.failed(...) 로 돌려준다.
    """
    try:
        chat = get_client().chat.completions.create(
            model=options.model,
            messages=[
                {"role": "system", "content": build_summary_instruction(options)},
                {"role": "user", "content": text},
            ],
            temperature=options.temperature,
        )
        content = (chat.choices[0].message.content or "").strip()

    except APITimeoutError as e:
        logger.warning(f"[summarize] timeout after {OPENAI_TIMEOUT}s")
        return SummaryResult.failed("timeout", str(e))

    except OpenAIError as e:
        # 인증, 쿼터(RateLimitError), 네트워크, 서버 오류 등
        logger.warning(f"[summarize] openai error: {type(e).__name__}")
        return SummaryResult.failed("api_error", getattr(e, "message", str(e)))

    except (AttributeError, IndexError, TypeError) as e:
        # 응답 구조가 예상과 다름
        logger.warning(f"[summarize] malformed response: {e}")
        return SummaryResult.failed("malformed_response", str(e))

    except Exception as e:
        # SDK 가 JSON 이 아닌 200 응답 등에서 던지는 나머지 (JSONDecodeError ...)
        logger.warning(f"[summarize] unexpected error: {type(e).__name__}: {e}")
        return SummaryResult.failed("unexpected", str(e))

    if not content:
        return SummaryResult.failed("empty_response")

    return SummaryResult.success(content)


def ask_chat(prompt: str) -> str:
    """
    prompt 한 개 -> completion 텍스트. 실패는 그대로 호출자에게 (재시도 없음).
    timeout 은 ReportTimeoutError, 나머지는 ReportGenerationError.
    """
    try:
        chat = get_client().chat.completions.create(
            model=OPENAI_MODEL,
            messages=[{"role": "user", "content": prompt}],
        )
        text = (chat.choices[0].message.content or "").strip()

    except APITimeoutError as e:
        raise ReportTimeoutError() from e

    except OpenAIError as e:
        raise ReportGenerationError(f"OpenAI API error: {getattr(e, 'message', str(e))}") from e

    except (AttributeError, IndexError, TypeError) as e:
        raise ReportGenerationError("Malformed chat completion response.") from e

    except Exception as e:
        raise ReportGenerationError(f"Unexpected chat completion failure: {type(e).__name__}") from e

    if not text:
        raise ReportGenerationError("Chat completion returned no text.")

    return text
