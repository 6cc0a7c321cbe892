"""
Learning module prompts.

Prompt templates for the four pieces of a learning module: tutorial,
quiz, image description and video script.

Dependencies: langchain_core.prompts
System role: Prompt templates for learning content generation
"""

from langchain_core.prompts import PromptTemplate

TUTORIAL_PROMPT = PromptTemplate.from_template(
    "You are a friendly and enthusiastic teacher. Your goal is to explain topics "
    "to students in a simple, engaging, and easy-to-understand way. Use analogies "
    "and simple language. Do not use markdown. Explain the topic \"{topic}\" for a "
    "{grade} student. The explanation should be concise, around 150-200 words."
)

QUIZ_PROMPT = PromptTemplate.from_template(
    "Create a {question_count}-question multiple-choice quiz about \"{topic}\" for a "
    "{grade} student. Each question must have exactly {option_count} options. Format "
    "your response as a JSON array with objects containing 'question', 'options' "
    "(array of {option_count} strings), and 'correctAnswer' (string matching one of "
    "the options)."
)

IMAGE_DESCRIPTION_PROMPT = PromptTemplate.from_template(
    "Create a detailed description for an educational image about \"{topic}\" "
    "suitable for {grade} students. The description should be visual and specific "
    "enough that it could be used to generate an image. Focus on educational "
    "elements that would help students understand the topic."
)

VIDEO_SCRIPT_PROMPT = PromptTemplate.from_template(
    "Create a short educational video script about \"{topic}\" for {grade} students. "
    "The script should be engaging, clear, and educational. It should be around "
    "200-300 words and divided into short paragraphs that could be narrated "
    "alongside images."
)
