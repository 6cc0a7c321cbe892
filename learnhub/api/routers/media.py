"""
Media generation API endpoints.

Routes:
- POST /media/images - Generate images synchronously
- POST /media/videos - Start a video job, poll it under /jobs

Dependencies: learnhub.application.services.media_service, learnhub.models
System role: Image and video generation HTTP API
"""

from fastapi import APIRouter, Depends, status

from learnhub.api.deps import get_media_service
from learnhub.api.routers.router_utils import handle_service_errors
from learnhub.application.services import MediaService
from learnhub.models.media import (
    GenerateMediaRequest,
    ImagesResponse,
    VideoJobAcceptedResponse,
)

router = APIRouter(prefix="/media", tags=["media"])


@router.post("/images", response_model=ImagesResponse)
@handle_service_errors
async def generate_images(
    request: GenerateMediaRequest,
    media_service: MediaService = Depends(get_media_service),
) -> ImagesResponse:
    """
    Generate images for a prompt.

    Raises:
        HTTPException(400): Empty prompt
        HTTPException(502): Provider rejected or failed the request
    """
    images = await media_service.generate_images(request.prompt, request.config)
    return ImagesResponse(images=images)


@router.post(
    "/videos",
    response_model=VideoJobAcceptedResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@handle_service_errors
async def start_video(
    request: GenerateMediaRequest,
    media_service: MediaService = Depends(get_media_service),
) -> VideoJobAcceptedResponse:
    """
    Start a video generation job.

    Returns the job id immediately; poll GET /jobs/{job_id} for progress.
    """
    job_id = media_service.start_video(request.prompt, request.config)
    return VideoJobAcceptedResponse(job_id=job_id)
