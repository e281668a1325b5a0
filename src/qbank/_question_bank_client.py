from dataclasses import replace
from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv

from ._config import Config
from ._services import HttpClient, QuestionBanksService, QuestionsService
from ._services._http_client import Fetch
from ._utils import (
    BearerTokenSecurityWorker,
    RequestParams,
    SecurityWorker,
    setup_logging,
)
from ._utils.constants import ENV_BASE_URL, ENV_QBANK_ACCESS_TOKEN
from .models import BaseUrlMissingError

load_dotenv()


class QuestionBankClient:
    """Client for the Question Bank API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        secret: Optional[str] = None,
        debug: bool = False,
        security_worker: Optional[SecurityWorker] = None,
        base_api_params: Optional[RequestParams] = None,
        custom_fetch: Optional[Fetch] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url (Optional[str]): Root URL of the API. Read from ``QBANK_URL`` when omitted.
            secret (Optional[str]): Access token. Read from ``QBANK_ACCESS_TOKEN`` when omitted.
                When a token is available every request is sent with a bearer token.
            debug (bool): Enable debug logging. Defaults to False.
            security_worker (Optional[SecurityWorker]): Replaces the bearer token worker.
            base_api_params (Optional[RequestParams]): Default options for every request.
            custom_fetch (Optional[Fetch]): Replacement transport.
        """
        base_url_value = base_url or env.get(ENV_BASE_URL)
        if not base_url_value:
            raise BaseUrlMissingError()
        secret_value = secret or env.get(ENV_QBANK_ACCESS_TOKEN)

        self._config = Config(
            base_url=base_url_value.rstrip("/"),
            secret=secret_value,
            secure=secret_value is not None or security_worker is not None,
        )

        setup_logging(debug)

        if security_worker is None and self._config.secret is not None:
            security_worker = BearerTokenSecurityWorker()

        default_params = base_api_params or RequestParams()
        if default_params.secure is None:
            default_params = replace(default_params, secure=self._config.secure)

        self._http_client = HttpClient(
            self._config.base_url,
            base_api_params=default_params,
            security_worker=security_worker,
            custom_fetch=custom_fetch,
        )
        self._http_client.set_security_data(self._config.secret)

    @property
    def http_client(self) -> HttpClient:
        """Low-level engine for requests not covered by the services."""
        return self._http_client

    @property
    def question_banks(self) -> QuestionBanksService:
        """Question banks are named collections of questions."""
        return QuestionBanksService(self._http_client)

    @property
    def questions(self) -> QuestionsService:
        """Questions with their answer options."""
        return QuestionsService(self._http_client)

    def set_security_data(self, data: Any) -> None:
        self._http_client.set_security_data(data)

    def abort_request(self, cancel_token: Any) -> None:
        self._http_client.abort_request(cancel_token)

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def __aenter__(self) -> "QuestionBankClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
