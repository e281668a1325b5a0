from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .response import HttpResponse


class QBankError(Exception):
    """Base class for all errors raised by the question bank client."""


class BaseUrlMissingError(QBankError):
    def __init__(
        self,
        message="Base URL missing. Pass base_url to QuestionBankClient or set the QBANK_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class SerializationError(QBankError):
    """Raised when a request body cannot be formatted for its content type."""


class ResponseDecodeError(QBankError):
    """Raised when a response body cannot be parsed in the requested format.

    The engine never raises this on its own; it is stored in the ``error``
    slot of the returned envelope.
    """

    def __init__(self, response_format: str, reason: str) -> None:
        self.response_format = response_format
        self.reason = reason
        super().__init__(f"Could not decode response body as {response_format}: {reason}")


class TransportError(QBankError):
    """The underlying network call could not complete."""

    def __init__(self, message: str, *, method: str = "", url: str = "") -> None:
        self.method = method
        self.url = url
        super().__init__(message)


class RequestAbortedError(TransportError):
    """The request was cancelled through its abort signal."""


class RedirectNotAllowedError(TransportError):
    """A redirect was returned while the redirect policy is ``error``."""


class HttpResponseError(QBankError):
    """Raised when a request produced an envelope carrying an error.

    The full envelope is kept on the exception so callers can inspect the
    decoded error body and the raw response.
    """

    def __init__(self, envelope: "HttpResponse[Any, Any]") -> None:
        self.envelope = envelope
        self.status_code = envelope.status_code
        self.error = envelope.error
        super().__init__(self._build_message())

    @property
    def response(self):
        return self.envelope.response

    def _build_message(self) -> str:
        request = self.envelope.response.request
        message = f"{request.method} {request.url} returned {self.status_code}"
        detail: Optional[str] = None
        if isinstance(self.error, dict):
            detail = (
                self.error.get("message")
                or self.error.get("error")
                or self.error.get("detail")
            )
        elif self.error is not None:
            detail = str(self.error)
        if detail:
            message = f"{message}: {detail}"
        return message
