from typing import Any, Mapping, Optional
from urllib.parse import quote

QueryParams = Mapping[str, Any]

# Characters left unescaped, matching encodeURIComponent.
_SAFE_CHARS = "-_.!~*'()"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query_param(key: str, value: Any) -> str:
    """Encode a single ``key=value`` pair."""
    encoded_key = quote(str(key), safe=_SAFE_CHARS)
    return f"{encoded_key}={quote(_stringify(value), safe=_SAFE_CHARS)}"


def _encode_array_query_param(key: str, values: Any) -> str:
    return "&".join(encode_query_param(key, value) for value in values)


def to_query_string(raw_query: Optional[QueryParams] = None) -> str:
    """Build a query string (without the leading ``?``) from a mapping.

    List and tuple values expand into one ``key=value`` pair per element, in
    order. Keys mapped to ``None`` are skipped.

    Examples:
        >>> to_query_string({"ids": [1, 2], "name": None})
        'ids=1&ids=2'
    """
    query = raw_query or {}
    parts = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            # an empty list contributes nothing
            if value:
                parts.append(_encode_array_query_param(key, value))
        else:
            parts.append(encode_query_param(key, value))
    return "&".join(parts)


def add_query_params(raw_query: Optional[QueryParams] = None) -> str:
    query_string = to_query_string(raw_query)
    return f"?{query_string}" if query_string else ""
