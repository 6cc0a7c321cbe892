"""Learning module content generation."""

from learnhub.core.learning.content_generator import LearningContentGenerator, parse_quiz
from learnhub.core.learning.learning_schema import LearningContent, QuizQuestion

__all__ = ["LearningContent", "LearningContentGenerator", "QuizQuestion", "parse_quiz"]
