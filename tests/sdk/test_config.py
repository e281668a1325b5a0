import pytest
from pytest_httpx import HTTPXMock

from qbank import BearerTokenSecurityWorker, QuestionBankClient, RequestParams
from qbank.models import BaseUrlMissingError


class TestClientConfig:
    def test_no_config(self) -> None:
        with pytest.raises(BaseUrlMissingError):
            QuestionBankClient()

    def test_config_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QBANK_URL", "https://example.com/api/")
        monkeypatch.setenv("QBANK_ACCESS_TOKEN", "1234567890")

        client = QuestionBankClient()

        assert client._config.base_url == "https://example.com/api"
        assert client._config.secret == "1234567890"
        assert client._config.secure is True
        assert isinstance(client.http_client.security_worker, BearerTokenSecurityWorker)

    def test_config_from_constructor(self) -> None:
        client = QuestionBankClient(base_url="https://example.com")

        assert client._config.base_url == "https://example.com"
        assert client._config.secret is None
        assert client._config.secure is False
        assert client.http_client.security_worker is None

    def test_base_api_params_are_not_modified(self) -> None:
        params = RequestParams(headers={"X-Client": "cli"})

        client = QuestionBankClient(base_url="https://example.com", base_api_params=params)

        assert params.secure is None
        assert client.http_client.base_api_params.headers == {"X-Client": "cli"}
        assert client.http_client.base_api_params.credentials == "same-origin"


class TestClientRequests:
    @pytest.mark.asyncio
    async def test_requests_carry_bearer_token(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://example.com/question_banks", json=[])

        async with QuestionBankClient(
            base_url="https://example.com", secret="secret-token"
        ) as client:
            await client.question_banks.list_async()

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["Authorization"] == "Bearer secret-token"

    @pytest.mark.asyncio
    async def test_security_data_can_be_replaced(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://example.com/questions/1", json={"id": 1})

        async with QuestionBankClient(
            base_url="https://example.com", secret="old-token"
        ) as client:
            client.set_security_data("new-token")
            await client.questions.retrieve_async(1)

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["Authorization"] == "Bearer new-token"
