"""
Learning module content generation.

Produces tutorial text, a multiple-choice quiz, an image description and a
narration script for a topic at a given grade level.

Dependencies: asyncio, json, pydantic, learnhub.core.generation
System role: Content pipeline behind learning modules
"""

import asyncio
import json
import logging
import re
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from learnhub.core.exceptions import ValidationError
from learnhub.core.generation.text_client import GeminiTextClient
from learnhub.core.learning.learning_prompt import (
    IMAGE_DESCRIPTION_PROMPT,
    QUIZ_PROMPT,
    TUTORIAL_PROMPT,
    VIDEO_SCRIPT_PROMPT,
)
from learnhub.core.learning.learning_schema import LearningContent, QuizQuestion

logger = logging.getLogger(__name__)

QUIZ_QUESTION_COUNT = 5
QUIZ_OPTION_COUNT = 4

_FENCE_RE = re.compile(r"```(?:json)?")
_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)


def _load_array(text: str) -> list[Any] | None:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, list) else None


def parse_quiz(raw: str) -> list[QuizQuestion]:
    """
    Parse model output into quiz questions.

    Strips markdown code fences, parses JSON and falls back to the first
    [...] block. Items that do not validate are skipped.

    Args:
        raw: Model response text

    Returns:
        list[QuizQuestion]: Parsed questions; empty when nothing parses
    """
    cleaned = _FENCE_RE.sub("", raw).strip()
    items = _load_array(cleaned)
    if items is None:
        match = _ARRAY_RE.search(cleaned)
        items = _load_array(match.group(0)) if match else None
    if items is None:
        logger.warning(f"{__name__}:parse_quiz - Could not parse quiz response")
        return []

    questions = []
    for item in items:
        try:
            questions.append(QuizQuestion.model_validate(item))
        except PydanticValidationError as e:
            logger.debug(f"{__name__}:parse_quiz - Skipping invalid question: {e}")
    return questions


class LearningContentGenerator:
    """Generates learning module content with a Gemini text client."""

    def __init__(self, text_client: GeminiTextClient) -> None:
        self._text_client = text_client

    async def generate_tutorial(self, topic: str, grade: str) -> str:
        return await self._text_client.generate_text(
            TUTORIAL_PROMPT.format(topic=topic, grade=grade)
        )

    async def generate_quiz(self, topic: str, grade: str) -> list[QuizQuestion]:
        raw = await self._text_client.generate_text(
            QUIZ_PROMPT.format(
                topic=topic,
                grade=grade,
                question_count=QUIZ_QUESTION_COUNT,
                option_count=QUIZ_OPTION_COUNT,
            )
        )
        return parse_quiz(raw)

    async def generate_image_description(self, topic: str, grade: str) -> str:
        return await self._text_client.generate_text(
            IMAGE_DESCRIPTION_PROMPT.format(topic=topic, grade=grade)
        )

    async def generate_video_script(self, topic: str, grade: str) -> str:
        return await self._text_client.generate_text(
            VIDEO_SCRIPT_PROMPT.format(topic=topic, grade=grade)
        )

    async def generate_all(self, topic: str, grade: str) -> LearningContent:
        """
        Generate all module content concurrently.

        Args:
            topic: Subject to teach
            grade: Student grade level (e.g. "5th grade")

        Returns:
            LearningContent: Tutorial, quiz, image description and script

        Raises:
            ValidationError: If topic or grade is blank
            ProviderError: If any generation call fails
        """
        if not topic or not topic.strip():
            raise ValidationError("Topic must not be empty", field="topic")
        if not grade or not grade.strip():
            raise ValidationError("Grade must not be empty", field="grade")

        logger.info(f"{__name__}:generate_all - START topic={topic!r} grade={grade!r}")
        tutorial, quiz, image_description, video_script = await asyncio.gather(
            self.generate_tutorial(topic, grade),
            self.generate_quiz(topic, grade),
            self.generate_image_description(topic, grade),
            self.generate_video_script(topic, grade),
        )
        logger.info(f"{__name__}:generate_all - END quiz_questions={len(quiz)}")
        return LearningContent(
            topic=topic,
            grade=grade,
            tutorial_content=tutorial,
            quiz_data=quiz,
            video_script=video_script,
            image_description=image_description,
        )
