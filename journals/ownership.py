# journals/ownership.py
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from django.core.exceptions import ValidationError as DjangoValidationError

from .exceptions import NotFoundError, NotOwnedError
from .models import Journal


class Ownership(enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    NOT_OWNED = "not_owned"


@dataclass(frozen=True)
class OwnershipCheck:
    status: Ownership
    journal: Optional[Journal] = None

    @property
    def ok(self) -> bool:
        return self.status is Ownership.OK


def check_journal_ownership(user, journal_id) -> OwnershipCheck:
    """읽기/수정/삭제 전에 항상 거치는 소유권 확인. 스토어는 건드리지 않는다."""
    try:
        journal = Journal.objects.filter(pk=journal_id).first()
    except DjangoValidationError:
        # UUID 형식이 아닌 id
        return OwnershipCheck(Ownership.NOT_FOUND)

    if journal is None:
        return OwnershipCheck(Ownership.NOT_FOUND)
    if journal.user_id != user.id:
        return OwnershipCheck(Ownership.NOT_OWNED)
    return OwnershipCheck(Ownership.OK, journal)


def require_journal_ownership(user, journal_id) -> Journal:
    check = check_journal_ownership(user, journal_id)
    if check.status is Ownership.NOT_FOUND:
        raise NotFoundError()
    if check.status is Ownership.NOT_OWNED:
        raise NotOwnedError()
    return check.journal
