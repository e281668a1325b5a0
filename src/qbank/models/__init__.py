from .errors import (
    BaseUrlMissingError,
    HttpResponseError,
    QBankError,
    RedirectNotAllowedError,
    RequestAbortedError,
    ResponseDecodeError,
    SerializationError,
    TransportError,
)
from .question_banks import AnswerOption, Question, QuestionBank
from .response import HttpResponse

__all__ = [
    "AnswerOption",
    "BaseUrlMissingError",
    "HttpResponse",
    "HttpResponseError",
    "QBankError",
    "Question",
    "QuestionBank",
    "RedirectNotAllowedError",
    "RequestAbortedError",
    "ResponseDecodeError",
    "SerializationError",
    "TransportError",
]
