from ._question_bank_client import QuestionBankClient
from ._services import HttpClient
from ._utils import (
    AbortSignal,
    BearerTokenSecurityWorker,
    CallableSecurityWorker,
    CancellationRegistry,
    ContentType,
    FormData,
    RequestDescriptor,
    RequestParams,
    ResponseFormat,
    SecurityWorker,
)
from .models import (
    AnswerOption,
    HttpResponse,
    HttpResponseError,
    QBankError,
    Question,
    QuestionBank,
    RequestAbortedError,
    ResponseDecodeError,
    SerializationError,
    TransportError,
)

__all__ = [
    "AbortSignal",
    "AnswerOption",
    "BearerTokenSecurityWorker",
    "CallableSecurityWorker",
    "CancellationRegistry",
    "ContentType",
    "FormData",
    "HttpClient",
    "HttpResponse",
    "HttpResponseError",
    "QBankError",
    "Question",
    "QuestionBank",
    "QuestionBankClient",
    "RequestAbortedError",
    "RequestDescriptor",
    "RequestParams",
    "ResponseDecodeError",
    "ResponseFormat",
    "SecurityWorker",
    "SerializationError",
    "TransportError",
]
