from io import StringIO

import jwt
import pytest
from django.core.management import call_command

from accounts.models import AppUser
from accounts.security.app_jwt import issue_app_jwt, verify_app_jwt
from journals.helpers import get_week_bounds
from journals.models import Journal


class TestAppJwt:
    def test_round_trip(self):
        payload = verify_app_jwt(issue_app_jwt(42, {"name": "alice"}))

        assert payload["sub"] == "42"
        assert payload["name"] == "alice"
        assert payload["exp"] > payload["iat"]

    def test_rejects_foreign_signature(self):
        token = jwt.encode({"sub": "42", "iss": "mind-dump"}, "other-key", algorithm="HS256")

        with pytest.raises(jwt.InvalidSignatureError):
            verify_app_jwt(token)


@pytest.mark.django_db
class TestSeedJournals:
    def test_creates_user_journals_and_token(self):
        out = StringIO()

        call_command("seed_journals", "--name", "demo", stdout=out)

        user = AppUser.objects.get(name="demo")
        journals = Journal.objects.filter(user=user)
        assert journals.count() == 3
        start, end = get_week_bounds()
        assert all(start <= j.created_at <= end for j in journals)
        assert all(j.summary == j.description for j in journals)

        token = out.getvalue().strip().splitlines()[-1]
        assert verify_app_jwt(token)["sub"] == str(user.id)

    def test_is_idempotent(self):
        call_command("seed_journals", stdout=StringIO())
        call_command("seed_journals", stdout=StringIO())

        assert AppUser.objects.filter(name="devuser").count() == 1
        assert Journal.objects.count() == 3
