import inspect
from typing import Any, Awaitable, Callable, Optional, Union

from ._request_params import RequestParams
from .constants import HEADER_AUTHORIZATION

SecurityWorkerFunc = Callable[
    [Any], Union[Optional[RequestParams], Awaitable[Optional[RequestParams]]]
]


class SecurityWorker:
    """Derives extra request options from the current security data.

    The base class injects nothing. Subclasses implement one auth scheme each.
    """

    async def get_request_params(self, security_data: Any) -> Optional[RequestParams]:
        return None


class BearerTokenSecurityWorker(SecurityWorker):
    """Sends the security data as a bearer token.

    The security data is either the token itself or a mapping holding it
    under ``access_token``.
    """

    async def get_request_params(self, security_data: Any) -> Optional[RequestParams]:
        token = security_data
        if isinstance(security_data, dict):
            token = security_data.get("access_token")
        if not token:
            return None
        return RequestParams(headers={HEADER_AUTHORIZATION: f"Bearer {token}"})


class CallableSecurityWorker(SecurityWorker):
    """Adapts a plain function, sync or async, to a security worker."""

    def __init__(self, func: SecurityWorkerFunc) -> None:
        self._func = func

    async def get_request_params(self, security_data: Any) -> Optional[RequestParams]:
        result = self._func(security_data)
        if inspect.isawaitable(result):
            result = await result
        return result


def mask_headers(headers: Any) -> dict[str, str]:
    """Copy of ``headers`` safe to log."""
    masked = dict(headers)
    for key in masked:
        if key.lower() == HEADER_AUTHORIZATION.lower():
            masked[key] = "***"
    return masked
