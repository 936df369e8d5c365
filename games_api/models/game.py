from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from ..core.validation import check_game_type, check_unique_question_ids, escape, not_blank, not_bool

# --- Request Models ---
class QuestionIn(BaseModel):
    model_config = ConfigDict(extra='ignore')

    questionID: str = Field(..., min_length=1, max_length=100)
    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)

    @field_validator('questionID', 'question', 'answer')
    @classmethod
    def clean_text(cls, v, info):
        return escape(not_blank(v, info.field_name))

    @field_validator('options')
    @classmethod
    def clean_options(cls, v):
        return [escape(not_blank(option, 'option')) for option in v]

    @model_validator(mode='after')
    def answer_in_options(self):
        if self.answer not in self.options:
            raise ValueError('answer must be one of the options')
        return self

class GameCreate(BaseModel):
    """Body of POST /games/"""
    model_config = ConfigDict(extra='ignore')

    name: str = Field(..., min_length=1, max_length=200)
    image: str = Field(..., min_length=1, max_length=2048)
    type: str = Field(..., min_length=1, max_length=100)
    points: int = Field(..., ge=0)
    questions: List[QuestionIn] = Field(..., min_length=1)

    @field_validator('name', 'image')
    @classmethod
    def clean_text(cls, v, info):
        return escape(not_blank(v, info.field_name))

    @field_validator('type')
    @classmethod
    def clean_type(cls, v):
        return escape(check_game_type(v))

    @field_validator('points', mode='before')
    @classmethod
    def reject_bool(cls, v, info):
        return not_bool(v, info.field_name)

    @field_validator('questions')
    @classmethod
    def unique_question_ids(cls, v):
        check_unique_question_ids(v)
        return v

class GameUpdate(BaseModel):
    """Body of PUT /games/{gameID}; every field is optional"""
    model_config = ConfigDict(extra='ignore')

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    image: Optional[str] = Field(None, min_length=1, max_length=2048)
    points: Optional[int] = Field(None, ge=0)
    questions: Optional[List[QuestionIn]] = None

    @field_validator('name', 'image')
    @classmethod
    def clean_text(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        return escape(not_blank(v, info.field_name))

    @field_validator('points', 'questions', mode='before')
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        return not_bool(v, info.field_name)

    @field_validator('questions')
    @classmethod
    def unique_question_ids(cls, v):
        check_unique_question_ids(v)
        return v

    def changes(self) -> dict:
        """Only the fields the client actually sent"""
        return self.model_dump(exclude_unset=True)
