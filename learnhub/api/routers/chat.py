"""Chat API endpoints.

Routes:
- POST /chat - Send a message (with optional history and image) to the study assistant

Dependencies: learnhub.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from learnhub.api.deps import get_chat_service
from learnhub.api.routers.router_utils import handle_service_errors
from learnhub.application.services import ChatService
from learnhub.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
@handle_service_errors
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Get the assistant reply for a message.

    The caller keeps the conversation; prior turns are sent in history.
    An attached image (data URL) turns the request into an image question.

    Raises:
        HTTPException(400): Empty message or malformed image
        HTTPException(502): Gemini request failed
    """
    text = await chat_service.reply(
        request.message,
        history=[turn.model_dump() for turn in request.history],
        image=request.image,
    )
    return ChatResponse(text=text)
