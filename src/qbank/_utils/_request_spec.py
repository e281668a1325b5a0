from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Optional

from ._content import ContentType
from ._query import QueryParams
from ._request_params import RequestParams


class ResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    BLOB = "blob"
    NONE = "none"


@dataclass(frozen=True)
class RequestDescriptor:
    """Declarative description of one outbound call.

    This class contains everything the engine needs to build and send a single
    request: path, method, query, body and how it is encoded, how the response
    is decoded, whether credentials are injected, and the token used to cancel
    it. A descriptor is consumed by exactly one call.
    """

    path: str
    method: str = "GET"
    query: Optional[QueryParams] = None
    body: Any = None
    type: ContentType = ContentType.JSON
    format: Optional[ResponseFormat] = None
    secure: Optional[bool] = None
    base_url: Optional[str] = None
    cancel_token: Optional[Hashable] = None
    params: RequestParams = field(default_factory=RequestParams)
