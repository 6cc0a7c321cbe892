"""
Learning module video endpoint.

Routes: POST /generate-video

Every outcome other than success is an {"error": message} body, including
malformed request bodies, so the module page has a single error shape.

Dependencies: learnhub.application.services.video_service, learnhub.models
System role: Module video HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from learnhub.api.deps import get_video_service
from learnhub.api.routers.router_utils import status_for
from learnhub.application.services import VideoService
from learnhub.core.exceptions import LearnHubException
from learnhub.models.video import GenerateVideoRequest, GenerateVideoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["video"])

GENERIC_FAILURE = "Failed to generate video"


async def _read_request(request: Request) -> GenerateVideoRequest:
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        payload = {}
    return GenerateVideoRequest.model_validate(payload)


def _error(code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=code, content={"error": message})


@router.post(
    "/generate-video",
    response_model=GenerateVideoResponse,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": GenerateVideoRequest.model_json_schema()}
            }
        }
    },
)
async def generate_video(
    request: Request,
    video_service: VideoService = Depends(get_video_service),
):
    """
    Generate a video for a learning module and store its URL on the module.

    Blocks until the video job finishes.

    Returns:
        200 {"videoUrl": str}
        400 {"error": "Missing moduleId or script"}
        404 {"error": ...} when the module does not exist
        500 {"error": ...} when generation or storage fails
    """
    body = await _read_request(request)
    try:
        video_url = await video_service.generate_for_module(body.moduleId or "", body.script or "")
    except LearnHubException as e:
        code = status_for(e)
        if code == status.HTTP_502_BAD_GATEWAY:
            code = status.HTTP_500_INTERNAL_SERVER_ERROR
        logger.error(f"{__name__}:generate_video - {type(e).__name__}: {e.message}")
        return _error(code, e.message)
    except Exception as e:
        logger.error(
            f"{__name__}:generate_video - Unexpected {type(e).__name__}: {e}",
            exc_info=True,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_FAILURE)
    return GenerateVideoResponse(videoUrl=video_url)
