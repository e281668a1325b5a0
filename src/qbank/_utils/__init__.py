from ._auth import (
    BearerTokenSecurityWorker,
    CallableSecurityWorker,
    SecurityWorker,
    mask_headers,
)
from ._cancellation import AbortController, AbortSignal, CancellationRegistry
from ._content import ContentType, FormData, format_body
from ._logs import setup_logging
from ._query import add_query_params, to_query_string
from ._request_params import RequestParams, merge_request_params
from ._request_spec import RequestDescriptor, ResponseFormat

__all__ = [
    "AbortController",
    "AbortSignal",
    "BearerTokenSecurityWorker",
    "CallableSecurityWorker",
    "CancellationRegistry",
    "ContentType",
    "FormData",
    "RequestDescriptor",
    "RequestParams",
    "ResponseFormat",
    "SecurityWorker",
    "add_query_params",
    "format_body",
    "mask_headers",
    "merge_request_params",
    "setup_logging",
    "to_query_string",
]
