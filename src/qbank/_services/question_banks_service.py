from typing import Any, Hashable, List, Optional, Union

from pydantic import TypeAdapter

from .._utils import ContentType, RequestDescriptor, RequestParams, ResponseFormat
from ..models import HttpResponse, Question, QuestionBank
from ._base_service import BaseService

_QUESTION_BANK = TypeAdapter(QuestionBank)
_QUESTION_BANKS = TypeAdapter(List[QuestionBank])
_QUESTIONS = TypeAdapter(List[Question])


class QuestionBanksService(BaseService):
    """Service for managing question banks.

    A question bank is a named collection of questions.
    """

    async def list_async(
        self,
        *,
        params: Optional[RequestParams] = None,
        cancel_token: Optional[Hashable] = None,
    ) -> HttpResponse[List[QuestionBank], Any]:
        """List all question banks.

        Args:
            params (Optional[RequestParams]): Per-call request options.
            cancel_token (Optional[Hashable]): Token that can be passed to
                ``abort_request`` to cancel the call.

        Returns:
            HttpResponse[List[QuestionBank], Any]: Envelope whose ``data`` holds the banks.

        Examples:
            ```python
            from qbank import QuestionBankClient

            async with QuestionBankClient() as client:
                result = await client.question_banks.list_async()
                for bank in result.data:
                    print(bank.name)
            ```
        """
        spec = self._with_call_options(self._list_spec(), params, cancel_token)
        return await self._request_async(spec, _QUESTION_BANKS)

    async def create_async(
        self,
        question_bank: Union[QuestionBank, dict[str, Any]],
        *,
        params: Optional[RequestParams] = None,
        cancel_token: Optional[Hashable] = None,
    ) -> HttpResponse[QuestionBank, str]:
        """Create a question bank.

        Args:
            question_bank (Union[QuestionBank, dict]): The bank to create; only ``name`` is required.
            params (Optional[RequestParams]): Per-call request options.
            cancel_token (Optional[Hashable]): Cancellation token for the call.

        Returns:
            HttpResponse[QuestionBank, str]: Envelope whose ``data`` holds the created bank.

        Raises:
            HttpResponseError: If the server rejects the bank, e.g. a missing name.
        """
        spec = self._with_call_options(
            self._create_spec(question_bank), params, cancel_token
        )
        return await self._request_async(spec, _QUESTION_BANK)

    async def questions_async(
        self,
        bank_id: int,
        *,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        tag: Optional[str] = None,
        params: Optional[RequestParams] = None,
        cancel_token: Optional[Hashable] = None,
    ) -> HttpResponse[List[Question], str]:
        """List the questions of a question bank.

        Args:
            bank_id (int): Id of the question bank.
            page (Optional[int]): 1-based page number. Server default when omitted.
            page_size (Optional[int]): Number of questions per page.
            tag (Optional[str]): Only return questions carrying this tag.
            params (Optional[RequestParams]): Per-call request options.
            cancel_token (Optional[Hashable]): Cancellation token for the call.

        Returns:
            HttpResponse[List[Question], str]: Envelope whose ``data`` holds the questions.
        """
        spec = self._with_call_options(
            self._questions_spec(bank_id, page=page, page_size=page_size, tag=tag),
            params,
            cancel_token,
        )
        return await self._request_async(spec, _QUESTIONS)

    async def update_async(
        self,
        bank_id: int,
        question_bank: Union[QuestionBank, dict[str, Any]],
        *,
        params: Optional[RequestParams] = None,
        cancel_token: Optional[Hashable] = None,
    ) -> HttpResponse[QuestionBank, str]:
        """Update a question bank by id.

        Args:
            bank_id (int): Id of the question bank.
            question_bank (Union[QuestionBank, dict]): The new values.
            params (Optional[RequestParams]): Per-call request options.
            cancel_token (Optional[Hashable]): Cancellation token for the call.

        Returns:
            HttpResponse[QuestionBank, str]: Envelope whose ``data`` holds the updated bank.
        """
        spec = self._with_call_options(
            self._update_spec(bank_id, question_bank), params, cancel_token
        )
        return await self._request_async(spec, _QUESTION_BANK)

    def _list_spec(self) -> RequestDescriptor:
        return RequestDescriptor(
            path="/question_banks",
            method="GET",
            type=ContentType.JSON,
            format=ResponseFormat.JSON,
        )

    def _create_spec(
        self, question_bank: Union[QuestionBank, dict[str, Any]]
    ) -> RequestDescriptor:
        return RequestDescriptor(
            path="/question_banks",
            method="POST",
            body=question_bank,
            type=ContentType.JSON,
            format=ResponseFormat.JSON,
        )

    def _questions_spec(
        self,
        bank_id: int,
        *,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        tag: Optional[str] = None,
    ) -> RequestDescriptor:
        return RequestDescriptor(
            path=f"/question_banks/{bank_id}/questions",
            method="GET",
            query={"page": page, "page_size": page_size, "tag": tag},
            type=ContentType.JSON,
            format=ResponseFormat.JSON,
        )

    def _update_spec(
        self, bank_id: int, question_bank: Union[QuestionBank, dict[str, Any]]
    ) -> RequestDescriptor:
        return RequestDescriptor(
            path=f"/question_banks/{bank_id}",
            method="PUT",
            body=question_bank,
            type=ContentType.JSON,
            format=ResponseFormat.JSON,
        )
