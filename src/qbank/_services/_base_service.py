from dataclasses import replace
from logging import getLogger
from typing import Any, Hashable, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from .._utils import RequestDescriptor, RequestParams
from .._utils.constants import LOGGER_NAME
from ..models import HttpResponse, HttpResponseError, ResponseDecodeError
from ._http_client import HttpClient

T = TypeVar("T")


class BaseService:
    """Base class for the endpoint services.

    Services describe remote operations as :class:`RequestDescriptor` objects
    and hand them to a shared :class:`HttpClient`.
    """

    def __init__(self, client: HttpClient) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._client = client

        super().__init__()

    @staticmethod
    def _with_call_options(
        descriptor: RequestDescriptor,
        params: Optional[RequestParams],
        cancel_token: Optional[Hashable],
    ) -> RequestDescriptor:
        changes: dict[str, Any] = {}
        if params is not None:
            changes["params"] = params
        if cancel_token is not None:
            changes["cancel_token"] = cancel_token
        return replace(descriptor, **changes) if changes else descriptor

    async def _request_async(
        self,
        descriptor: RequestDescriptor,
        adapter: TypeAdapter[T],
    ) -> HttpResponse[T, Any]:
        result = await self._client.request(descriptor)
        if result.data is not None:
            try:
                result.data = adapter.validate_python(result.data)
            except ValidationError as e:
                result.data = None
                result.error = ResponseDecodeError("json", str(e))
                self._logger.warning(
                    f"{descriptor.method} {descriptor.path} returned an unexpected body"
                )
                raise HttpResponseError(result) from e
        return result
