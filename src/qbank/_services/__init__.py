from ._base_service import BaseService
from ._http_client import HttpClient
from .question_banks_service import QuestionBanksService
from .questions_service import QuestionsService

__all__ = [
    "BaseService",
    "HttpClient",
    "QuestionBanksService",
    "QuestionsService",
]
