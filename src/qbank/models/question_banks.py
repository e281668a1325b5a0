from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class AnswerOption(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[int] = None
    is_correct: Optional[bool] = None
    option_text: Optional[str] = None
    question_id: Optional[int] = None


class Question(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[int] = None
    content: Optional[str] = None
    explanation: Optional[str] = None
    question_bank_id: Optional[int] = None
    question_type_id: Optional[int] = None
    answer_options: Optional[List[AnswerOption]] = None

    @property
    def correct_options(self) -> List[AnswerOption]:
        return [option for option in self.answer_options or [] if option.is_correct]


class QuestionBank(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[int] = None
    name: Optional[str] = None
