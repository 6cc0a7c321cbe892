"""Gemini text and vision client.

Wraps LangChain's ChatGoogleGenerativeAI for one-shot completions,
multi-turn chat and image description.

Dependencies: langchain_google_genai, langchain_core
System role: Text generation for chat and learning content
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from learnhub.core.exceptions import ConfigurationError, ValidationError
from learnhub.core.generation.provider import describe_provider_error

if TYPE_CHECKING:
    from learnhub.configs.gemini import GeminiSettings

logger = logging.getLogger(__name__)

SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
}

ASSISTANT_ROLES = frozenset({"assistant", "model", "ai"})


def to_langchain_messages(history: Sequence[dict[str, str]]) -> list[BaseMessage]:
    """Convert [{"role", "content"}] chat history to LangChain messages."""
    messages: list[BaseMessage] = []
    for entry in history:
        content = entry.get("content", "")
        if entry.get("role", "user") in ASSISTANT_ROLES:
            messages.append(AIMessage(content=content))
        else:
            messages.append(HumanMessage(content=content))
    return messages


def message_text(message: BaseMessage) -> str:
    """Extract plain text from a model response (str or content-part list)."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GeminiTextClient:
    """Text, chat and vision calls against a Gemini model."""

    def __init__(self, chat_model: Any, content_model: Any | None = None) -> None:
        """
        Args:
            chat_model: Chat model configured with chat sampling parameters
            content_model: Model for one-shot content and vision (defaults to chat_model)
        """
        self._chat_model = chat_model
        self._content_model = content_model or chat_model

    @classmethod
    def from_settings(cls, settings: "GeminiSettings") -> "GeminiTextClient":
        """
        Build a client from Gemini settings.

        Raises:
            ConfigurationError: If GEMINI_API_KEY is not configured
        """
        if not settings.api_key:
            raise ConfigurationError(
                "Gemini API key is not configured", setting="GEMINI_API_KEY"
            )
        chat_model = ChatGoogleGenerativeAI(
            model=settings.text_model,
            google_api_key=settings.api_key,
            temperature=settings.chat_temperature,
            top_k=settings.chat_top_k,
            top_p=settings.chat_top_p,
            max_output_tokens=settings.chat_max_output_tokens,
            safety_settings=SAFETY_SETTINGS,
        )
        content_model = ChatGoogleGenerativeAI(
            model=settings.text_model,
            google_api_key=settings.api_key,
            safety_settings=SAFETY_SETTINGS,
        )
        logger.info(f"{__name__}:from_settings - model={settings.text_model}")
        return cls(chat_model, content_model)

    async def generate_text(self, prompt: str) -> str:
        """One-shot completion."""
        return await self._invoke(self._content_model, [HumanMessage(content=prompt)], "generate_text")

    async def chat(self, message: str, history: Sequence[dict[str, str]] = ()) -> str:
        """
        Multi-turn chat reply.

        Args:
            message: New user message
            history: Prior turns as {"role": "user"|"model", "content": str}

        Returns:
            str: Assistant reply text
        """
        if not message or not message.strip():
            raise ValidationError("Message must not be empty", field="message")
        messages = to_langchain_messages(history)
        messages.append(HumanMessage(content=message))
        return await self._invoke(self._chat_model, messages, "chat")

    async def describe_image(self, prompt: str, image_data_url: str) -> str:
        """Vision request: answer a prompt about an inline (data URL) image."""
        if not image_data_url.startswith("data:"):
            raise ValidationError("Image must be a data URL", field="image")
        message = HumanMessage(
            content=[
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": image_data_url},
            ]
        )
        return await self._invoke(self._content_model, [message], "describe_image")

    async def _invoke(self, model: Any, messages: list[BaseMessage], operation: str) -> str:
        logger.debug(f"{__name__}:{operation} - START messages={len(messages)}")
        try:
            response = await model.ainvoke(messages)
        except Exception as e:
            logger.error(
                f"{__name__}:{operation} - {type(e).__name__}: {e}",
                exc_info=True,
            )
            raise describe_provider_error(e, provider="gemini") from e
        text = message_text(response)
        logger.debug(f"{__name__}:{operation} - END response_len={len(text)}")
        return text
