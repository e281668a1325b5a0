from typing import Hashable, Optional

from pydantic import TypeAdapter

from .._utils import ContentType, RequestDescriptor, RequestParams, ResponseFormat
from ..models import HttpResponse, Question
from ._base_service import BaseService

_QUESTION = TypeAdapter(Question)


class QuestionsService(BaseService):
    """Service for reading individual questions."""

    async def retrieve_async(
        self,
        question_id: int,
        *,
        params: Optional[RequestParams] = None,
        cancel_token: Optional[Hashable] = None,
    ) -> HttpResponse[Question, str]:
        """Retrieve a question with its answer options.

        Args:
            question_id (int): Id of the question.
            params (Optional[RequestParams]): Per-call request options.
            cancel_token (Optional[Hashable]): Cancellation token for the call.

        Returns:
            HttpResponse[Question, str]: Envelope whose ``data`` holds the question.
        """
        spec = self._with_call_options(
            self._retrieve_spec(question_id), params, cancel_token
        )
        return await self._request_async(spec, _QUESTION)

    def _retrieve_spec(self, question_id: int) -> RequestDescriptor:
        return RequestDescriptor(
            path=f"/questions/{question_id}",
            method="GET",
            type=ContentType.JSON,
            format=ResponseFormat.JSON,
        )
