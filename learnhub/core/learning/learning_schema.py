"""
Learning module content schemas.

Dependencies: pydantic
System role: Structured output of learning content generation
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QuizQuestion(BaseModel):
    """Multiple-choice quiz question."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(min_length=1)
    options: list[str] = Field(min_length=2)
    correct_answer: str = Field(alias="correctAnswer")

    @model_validator(mode="after")
    def answer_is_an_option(self) -> "QuizQuestion":
        if self.correct_answer not in self.options:
            raise ValueError("correctAnswer must match one of the options")
        return self


class LearningContent(BaseModel):
    """Generated content of one learning module."""

    topic: str
    grade: str
    tutorial_content: str
    quiz_data: list[QuizQuestion] = Field(default_factory=list)
    video_script: str
    image_description: str
