"""
Job API endpoints.

Routes:
- GET /jobs - Retained jobs, most recent first
- GET /jobs/{id} - Job status and progress
- GET /jobs/{id}/download - Completed job's artifact
- POST /jobs/cleanup - Apply the retention window

Dependencies: learnhub.application.services.media_service, learnhub.models
System role: Job status HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from learnhub.api.deps import get_media_service
from learnhub.api.routers.router_utils import handle_service_errors
from learnhub.application.services import MediaService
from learnhub.core.jobs.models import Job
from learnhub.models.job import JobCleanupResponse, JobStatusResponse

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _require_job(media_service: MediaService, job_id: str) -> Job:
    job = media_service.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail=f"Job {job_id} not found")
    return job


@router.get("", response_model=list[JobStatusResponse])
async def list_jobs(
    media_service: MediaService = Depends(get_media_service),
) -> list[JobStatusResponse]:
    return [JobStatusResponse.from_job(job) for job in media_service.list_jobs()]


@router.get("/{job_id}", response_model=JobStatusResponse)
async def get_job_status(
    job_id: str,
    media_service: MediaService = Depends(get_media_service),
) -> JobStatusResponse:
    """
    Get job status and progress for frontend polling.

    Frontend should poll this endpoint every 1-2 seconds while the job is
    pending or running.

    Raises:
        HTTPException(404): Job not found (never existed or evicted)

    Example Response:
        {
            "id": "video_0f3c...",
            "prompt": "A volcano erupting",
            "status": "running",
            "display_status": "generating",
            "progress": 50,
            "result": null,
            "error": null,
            "created_at": "2025-01-01T12:00:00Z",
            "updated_at": "2025-01-01T12:00:02Z"
        }
    """
    return JobStatusResponse.from_job(_require_job(media_service, job_id))


@router.get("/{job_id}/download")
@handle_service_errors
async def download_job_artifact(
    job_id: str,
    media_service: MediaService = Depends(get_media_service),
) -> Response:
    """
    Download a completed job's artifact.

    Raises:
        HTTPException(404): Job not found
        HTTPException(400): Job has not completed
    """
    job = _require_job(media_service, job_id)
    content, mime_type, filename = await media_service.job_artifact(job)
    return Response(
        content=content,
        media_type=mime_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/cleanup", response_model=JobCleanupResponse)
async def cleanup_jobs(
    media_service: MediaService = Depends(get_media_service),
) -> JobCleanupResponse:
    evicted, retained = media_service.cleanup_jobs()
    return JobCleanupResponse(evicted=evicted, retained=retained)
