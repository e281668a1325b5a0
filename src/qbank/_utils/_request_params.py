from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Dict, Optional, Union

if TYPE_CHECKING:
    from ._cancellation import AbortSignal
    from ._request_spec import ResponseFormat


@dataclass
class RequestParams:
    """Transport-level request options.

    Every field left as ``None`` is treated as "not set" by
    :func:`merge_request_params`, so a layer only overrides what it defines.
    """

    headers: Dict[str, str] = field(default_factory=dict)
    credentials: Optional[str] = None
    redirect: Optional[str] = None
    referrer_policy: Optional[str] = None
    secure: Optional[bool] = None
    format: Optional["ResponseFormat"] = None
    signal: Optional["AbortSignal"] = None
    timeout: Optional[Union[int, float]] = None


def _merge_headers(*layers: Optional[Dict[str, str]]) -> Dict[str, str]:
    merged: Dict[str, str] = {}
    for headers in layers:
        for key, value in (headers or {}).items():
            # header names are case-insensitive, the later spelling wins
            for existing in [k for k in merged if k.lower() == key.lower()]:
                del merged[existing]
            merged[key] = value
    return merged


def merge_request_params(
    base: RequestParams,
    params1: Optional[RequestParams] = None,
    params2: Optional[RequestParams] = None,
) -> RequestParams:
    """Merge up to three option layers, lowest precedence first.

    Headers are merged key by key; every other field comes from the highest
    layer that sets it.
    """
    layers = [layer for layer in (base, params1, params2) if layer is not None]
    merged = RequestParams(headers=_merge_headers(*(layer.headers for layer in layers)))
    for f in fields(RequestParams):
        if f.name == "headers":
            continue
        for layer in layers:
            value = getattr(layer, f.name)
            if value is not None:
                setattr(merged, f.name, value)
    return merged
