"""공통 fixture"""
from unittest.mock import MagicMock, patch

import httpx
import pytest
from openai import OpenAI
from rest_framework.test import APIClient

from accounts.models import AppUser
from accounts.security.app_jwt import issue_app_jwt
from journals.integrations import openai_clients
from journals.integrations.openai_clients import SummaryResult
from journals.services import JournalService


@pytest.fixture
def user(db):
    return AppUser.objects.create(name="alice")


@pytest.fixture
def other_user(db):
    return AppUser.objects.create(name="bob")


@pytest.fixture
def summarizer():
    """항상 성공하는 요약 어댑터 mock"""
    return MagicMock(return_value=SummaryResult.success("- Had a great walk - Felt happy"))


@pytest.fixture
def chat():
    return MagicMock(return_value="What a week! Keep going.")


@pytest.fixture
def service(summarizer, chat):
    return JournalService(summarizer=summarizer, chat=chat)


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_app_jwt(user.id)}")
    return client


@pytest.fixture
def non_json_openai():
    """실제 OpenAI 클라이언트 + 200/application/json 인데 body 가 JSON 이 아닌 서버"""
    def handler(request):
        return httpx.Response(200, headers={"content-type": "application/json"}, content=b"<html>oops")

    client = OpenAI(
        api_key="test-key",
        base_url="https://openai.test/v1",
        max_retries=0,
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    with patch.object(openai_clients, "get_client", return_value=client):
        yield client
