import asyncio
from logging import getLogger
from typing import Any, Awaitable, Callable, Dict, Optional

from httpx import AsyncClient, Request, RequestError, Response

from .._utils import (
    AbortSignal,
    CancellationRegistry,
    ContentType,
    FormData,
    RequestDescriptor,
    RequestParams,
    ResponseFormat,
    SecurityWorker,
    format_body,
    mask_headers,
    merge_request_params,
    to_query_string,
)
from .._utils.constants import (
    CREDENTIALS_OMIT,
    CREDENTIALS_SAME_ORIGIN,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_COOKIE,
    HEADER_REFERER,
    LOGGER_NAME,
    REDIRECT_ERROR,
    REDIRECT_FOLLOW,
    REFERRER_POLICY_NO_REFERRER,
)
from ..models import (
    HttpResponse,
    HttpResponseError,
    RedirectNotAllowedError,
    RequestAbortedError,
    ResponseDecodeError,
    TransportError,
)

Fetch = Callable[..., Awaitable[Response]]


def default_request_params() -> RequestParams:
    return RequestParams(
        headers={},
        credentials=CREDENTIALS_SAME_ORIGIN,
        redirect=REDIRECT_FOLLOW,
        referrer_policy=REFERRER_POLICY_NO_REFERRER,
    )


class HttpClient:
    """Executes request descriptors against a remote HTTP API.

    Each call performs exactly one transport request. Options are merged from
    the engine defaults, the security worker and the descriptor, the body is
    formatted for its content type and the response body is decoded into an
    :class:`HttpResponse` envelope. Responses with a non-success status are
    raised as :class:`HttpResponseError` carrying that envelope.

    Args:
        base_url: Prefix for every request path unless a descriptor overrides it.
        base_api_params: Engine-wide default options, merged over the built-in
            defaults (same-origin credentials, follow redirects, no referrer).
        security_worker: Derives auth options for requests marked ``secure``.
        custom_fetch: Replacement transport, called as
            ``await custom_fetch(request, follow_redirects=...)``.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        base_api_params: Optional[RequestParams] = None,
        security_worker: Optional[SecurityWorker] = None,
        custom_fetch: Optional[Fetch] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self.base_url = base_url
        self.base_api_params = merge_request_params(
            default_request_params(), base_api_params
        )
        self.security_worker = security_worker
        self._security_data: Any = None
        self.cancellation = CancellationRegistry()

        # no implicit timeout, callers compose their own with a signal
        self._client = AsyncClient(timeout=None)
        self._fetch: Fetch = custom_fetch or self._client.send

    def set_security_data(self, data: Any) -> None:
        self._security_data = data

    def abort_request(self, cancel_token: Any) -> None:
        self.cancellation.cancel(cancel_token)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def request(self, descriptor: RequestDescriptor) -> HttpResponse[Any, Any]:
        secure = (
            descriptor.secure
            if descriptor.secure is not None
            else self.base_api_params.secure
        )
        secure_params: Optional[RequestParams] = None
        if secure and self.security_worker is not None:
            secure_params = await self.security_worker.get_request_params(
                self._security_data
            )

        params = merge_request_params(
            self.base_api_params, secure_params, descriptor.params
        )
        # per-call params win over the endpoint format, engine defaults come last
        response_format = (
            descriptor.params.format or descriptor.format or params.format
        )

        body = (
            None
            if descriptor.body is None
            else format_body(descriptor.type, descriptor.body)
        )

        query_string = to_query_string(descriptor.query)
        url = f"{descriptor.base_url or self.base_url or ''}{descriptor.path}"
        if query_string:
            url = f"{url}?{query_string}"

        headers = {
            key: value
            for key, value in params.headers.items()
            if key.lower() != HEADER_CONTENT_TYPE.lower()
        }
        if descriptor.type != ContentType.FORM_DATA:
            headers[HEADER_CONTENT_TYPE] = ContentType(descriptor.type).value

        request = self._build_request(descriptor.method, url, headers, body, params)

        signal: Optional[AbortSignal] = params.signal
        if descriptor.cancel_token is not None:
            signal = self.cancellation.signal_for(descriptor.cancel_token)

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {mask_headers(request.headers)}")

        try:
            response = await self._dispatch(request, params, signal)
            result = await self._decode(response, response_format)
        finally:
            if descriptor.cancel_token is not None:
                self.cancellation.release(descriptor.cancel_token, signal)

        if not result.ok or result.error is not None:
            self._logger.warning(
                f"{request.method} {request.url} failed with status {result.status_code}"
            )
            raise HttpResponseError(result)

        return result

    def _build_request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Any,
        params: RequestParams,
    ) -> Request:
        kwargs: Dict[str, Any] = {"headers": headers}
        if isinstance(body, FormData):
            kwargs["files"] = body.to_httpx_files()
        elif isinstance(body, str):
            kwargs["content"] = body.encode("utf-8")
        elif isinstance(body, (bytes, bytearray)):
            kwargs["content"] = bytes(body)
        elif isinstance(body, bool):
            kwargs["content"] = b"true" if body else b"false"
        elif body is not None:
            kwargs["content"] = str(body).encode("utf-8")

        if params.timeout is not None:
            kwargs["timeout"] = params.timeout

        request = self._client.build_request(method.upper(), url, **kwargs)

        if params.credentials == CREDENTIALS_OMIT:
            request.headers.pop(HEADER_COOKIE, None)
            request.headers.pop(HEADER_AUTHORIZATION, None)
        if params.referrer_policy == REFERRER_POLICY_NO_REFERRER:
            request.headers.pop(HEADER_REFERER, None)

        return request

    async def _dispatch(
        self,
        request: Request,
        params: RequestParams,
        signal: Optional[AbortSignal],
    ) -> Response:
        follow_redirects = params.redirect in (None, REDIRECT_FOLLOW)
        method, url = request.method, str(request.url)

        if signal is not None and signal.aborted:
            raise RequestAbortedError(str(signal.reason), method=method, url=url)

        try:
            if signal is None:
                response = await self._fetch(request, follow_redirects=follow_redirects)
            else:
                response = await self._fetch_until_aborted(
                    request, follow_redirects, signal
                )
        except RequestError as e:
            raise TransportError(
                f"{method} {url} could not be completed: {e}", method=method, url=url
            ) from e

        try:
            response.request
        except RuntimeError:
            # custom transports may return a response without its request
            response.request = request

        if params.redirect == REDIRECT_ERROR and response.is_redirect:
            await response.aclose()
            raise RedirectNotAllowedError(
                f"{method} {url} was redirected to {response.headers.get('Location')}",
                method=method,
                url=url,
            )
        return response

    async def _fetch_until_aborted(
        self, request: Request, follow_redirects: bool, signal: AbortSignal
    ) -> Response:
        fetch_task = asyncio.ensure_future(
            self._fetch(request, follow_redirects=follow_redirects)
        )
        abort_task = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait(
                {fetch_task, abort_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            abort_task.cancel()
            if not fetch_task.done():
                fetch_task.cancel()

        if fetch_task in done:
            return fetch_task.result()

        await asyncio.gather(fetch_task, return_exceptions=True)
        self._logger.info(f"{request.method} {request.url} aborted: {signal.reason}")
        raise RequestAbortedError(
            str(signal.reason), method=request.method, url=str(request.url)
        )

    async def _decode(
        self, response: Response, response_format: Optional[ResponseFormat]
    ) -> HttpResponse[Any, Any]:
        result: HttpResponse[Any, Any] = HttpResponse(response=response)
        await response.aread()

        if response_format is None or response_format == ResponseFormat.NONE:
            return result

        try:
            if response_format == ResponseFormat.JSON:
                data = response.json()
            elif response_format == ResponseFormat.TEXT:
                data = response.text
            else:
                data = response.content
        except ValueError as e:
            result.error = ResponseDecodeError(ResponseFormat(response_format).value, str(e))
            return result

        if response.is_success:
            result.data = data
        else:
            result.error = data
        return result
