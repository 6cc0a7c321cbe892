"""
Chat service for the study assistant.

Sends a user message, with prior turns and an optional image, to Gemini and
returns the assistant reply. History is kept by the caller.

Dependencies: learnhub.core.generation
System role: Chat service orchestration layer
"""

import logging
from collections.abc import Sequence

from learnhub.core.generation.text_client import GeminiTextClient

logger = logging.getLogger(__name__)

HISTORY_WINDOW = 20


class ChatService:
    """
    Chat service for conversational help.

    Uses a vision request when an image is attached, otherwise a multi-turn
    chat over the most recent turns of history.
    """

    def __init__(self, text_client: GeminiTextClient) -> None:
        """
        Initialize chat service.

        Args:
            text_client: Gemini text/vision client
        """
        self.text_client = text_client

    async def reply(
        self,
        message: str,
        history: Sequence[dict[str, str]] = (),
        image: str | None = None,
    ) -> str:
        """
        Produce the assistant reply.

        Args:
            message: User message
            history: Prior turns as {"role", "content"} dicts, oldest first
            image: Optional image data URL

        Returns:
            str: Assistant reply text

        Raises:
            ValidationError: If message is empty or image is not a data URL
            ProviderError: If Gemini rejects or fails the request
        """
        logger.info(
            f"{__name__}:reply - START history={len(history)} has_image={image is not None}"
        )
        if image:
            text = await self.text_client.describe_image(message, image)
        else:
            text = await self.text_client.chat(message, list(history)[-HISTORY_WINDOW:])
        logger.info(f"{__name__}:reply - END response_len={len(text)}")
        return text
