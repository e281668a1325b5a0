import io
import json
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from ..models.errors import SerializationError
from ._query import to_query_string


class ContentType(str, Enum):
    JSON = "application/json"
    FORM_DATA = "multipart/form-data"
    URL_ENCODED = "application/x-www-form-urlencoded"
    TEXT = "text/plain"


class FormData:
    """Ordered multipart form container.

    Text fields and binary parts keep their insertion order; the same name
    may be appended more than once.
    """

    DEFAULT_FILENAME = "blob"

    def __init__(self) -> None:
        self._entries: List[Tuple[str, Any]] = []

    def append(self, name: str, value: Any) -> None:
        self._entries.append((name, value))

    def get_all(self, name: str) -> List[Any]:
        return [value for key, value in self._entries if key == name]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_httpx_files(self) -> List[Tuple[str, Any]]:
        """Render the entries as an httpx ``files`` list.

        Text fields are sent as ``(None, value)`` parts so httpx encodes them
        without a filename; the request is multipart even without files.
        """
        files: List[Tuple[str, Any]] = []
        for name, value in self._entries:
            if isinstance(value, (bytes, bytearray)):
                files.append((name, (self.DEFAULT_FILENAME, bytes(value))))
            elif is_file_like(value):
                files.append((name, value))
            else:
                files.append((name, (None, value)))
        return files


def is_file_like(value: Any) -> bool:
    if isinstance(value, (bytes, bytearray, io.IOBase)):
        return True
    return callable(getattr(value, "read", None))


def _jsonable(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", exclude_none=True)
    return value


def json_dumps(value: Any) -> str:
    """Serialize ``value`` to compact JSON text.

    Raises:
        SerializationError: If the value is circular or not JSON serializable.
    """
    try:
        return json.dumps(
            _jsonable(value),
            separators=(",", ":"),
            ensure_ascii=False,
            default=_jsonable_default,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not serialize request body: {e}") from e


def _jsonable_default(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _format_json(body: Any) -> Any:
    if body is None or isinstance(body, (bool, int, float, bytes, bytearray)):
        return body
    return json_dumps(body)


def _format_text(body: Any) -> Any:
    if body is not None and not isinstance(body, str):
        return json_dumps(body)
    return body


def _format_form_data(body: Any) -> FormData:
    form_data = FormData()
    for key, value in dict(_jsonable(body) or {}).items():
        if is_file_like(value):
            form_data.append(key, value)
        elif isinstance(value, (dict, list, tuple)):
            form_data.append(key, json_dumps(value))
        elif isinstance(value, bool) or value is None:
            form_data.append(key, json_dumps(value))
        else:
            form_data.append(key, f"{value}")
    return form_data


def _format_url_encoded(body: Any) -> str:
    return to_query_string(_jsonable(body))


CONTENT_FORMATTERS: Dict[ContentType, Callable[[Any], Any]] = {
    ContentType.JSON: _format_json,
    ContentType.TEXT: _format_text,
    ContentType.FORM_DATA: _format_form_data,
    ContentType.URL_ENCODED: _format_url_encoded,
}


def format_body(content_type: ContentType, body: Any) -> Any:
    """Turn a request body into the payload sent for ``content_type``."""
    return CONTENT_FORMATTERS[ContentType(content_type)](body)
