from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from httpx import Response

T = TypeVar("T")
E = TypeVar("E")


@dataclass
class HttpResponse(Generic[T, E]):
    """Uniform result of a single request.

    ``data`` holds the decoded body of a successful response, ``error`` the
    decoded body of a failed one (or the decode failure itself). Both stay
    ``None`` when no response format was requested; the raw ``response`` is
    always available.
    """

    response: Response
    data: Optional[T] = None
    error: Optional[E] = None

    @property
    def ok(self) -> bool:
        return self.response.is_success

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self):
        return self.response.headers
