import json

import pytest
from pydantic import ValidationError
from pytest_httpx import HTTPXMock

from qbank import HttpClient, QuestionBank, RequestParams
from qbank._services import QuestionBanksService
from qbank.models import (
    AnswerOption,
    HttpResponseError,
    Question,
    ResponseDecodeError,
)


@pytest.fixture
def service(http_client: HttpClient) -> QuestionBanksService:
    return QuestionBanksService(http_client)


class TestQuestionBanksService:
    class TestListQuestionBanks:
        @pytest.mark.asyncio
        async def test_list(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks",
                method="GET",
                status_code=200,
                json=[{"id": 1, "name": "Math"}, {"id": 2}],
            )

            result = await service.list_async()

            assert result.data == [QuestionBank(id=1, name="Math"), QuestionBank(id=2)]
            assert result.error is None

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.headers["Content-Type"] == "application/json"

        @pytest.mark.asyncio
        async def test_list_with_call_params(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(url=f"{base_url}/question_banks", json=[])

            await service.list_async(
                params=RequestParams(headers={"Accept-Language": "zh-CN"}),
                cancel_token="list",
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["Accept-Language"] == "zh-CN"

    class TestCreateQuestionBank:
        @pytest.mark.asyncio
        async def test_create(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks",
                method="POST",
                status_code=201,
                json={"id": 2, "name": "Science"},
            )

            result = await service.create_async(QuestionBank(name="Science"))

            assert result.data == QuestionBank(id=2, name="Science")

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {"name": "Science"}

        @pytest.mark.asyncio
        async def test_create_rejected(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks",
                method="POST",
                status_code=400,
                json="name is required",
            )

            with pytest.raises(HttpResponseError) as exc_info:
                await service.create_async({})

            assert exc_info.value.error == "name is required"

    class TestUpdateQuestionBank:
        @pytest.mark.asyncio
        async def test_update(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks/2",
                method="PUT",
                json={"id": 2, "name": "Physics"},
            )

            result = await service.update_async(2, {"name": "Physics"})

            assert result.data == QuestionBank(id=2, name="Physics")

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.method == "PUT"
            assert json.loads(sent_request.content) == {"name": "Physics"}

    class TestListQuestions:
        @pytest.mark.asyncio
        async def test_questions(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks/1/questions",
                method="GET",
                json=[
                    {
                        "id": 10,
                        "content": "2 + 2 = ?",
                        "question_bank_id": 1,
                        "question_type_id": 1,
                        "answer_options": [
                            {"id": 1, "option_text": "4", "is_correct": True, "question_id": 10},
                            {"id": 2, "option_text": "5", "is_correct": False, "question_id": 10},
                        ],
                    }
                ],
            )

            result = await service.questions_async(1)

            assert result.data is not None
            [question] = result.data
            assert isinstance(question, Question)
            assert question.content == "2 + 2 = ?"
            assert question.correct_options == [
                AnswerOption(id=1, option_text="4", is_correct=True, question_id=10)
            ]

        @pytest.mark.asyncio
        async def test_questions_with_filters(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks/1/questions?page=2&page_size=5&tag=linear%20algebra",
                json=[],
            )

            result = await service.questions_async(
                1, page=2, page_size=5, tag="linear algebra"
            )

            assert result.data == []

    class TestUnexpectedBody:
        @pytest.mark.asyncio
        async def test_mismatched_body_raises_envelope(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks", json=[{"id": "not-an-int"}]
            )

            with pytest.raises(HttpResponseError) as exc_info:
                await service.list_async()

            envelope = exc_info.value.envelope
            assert envelope.ok
            assert envelope.data is None
            assert isinstance(envelope.error, ResponseDecodeError)
            assert isinstance(exc_info.value.__cause__, ValidationError)

        @pytest.mark.asyncio
        async def test_wrapped_list_is_rejected(
            self, httpx_mock: HTTPXMock, service: QuestionBanksService, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/question_banks",
                json={"status": "success", "data": []},
            )

            with pytest.raises(HttpResponseError):
                await service.list_async()
