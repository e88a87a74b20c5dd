"""Job listing and execution endpoints."""

from typing import Iterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from ..core.constants import JOB_STREAM_MEDIA_TYPE
from ..models.schemas import ErrorResponse, JobDescriptor, JobResult
from ..services.plugin_service import PluginService
from .dependencies import get_plugin_service


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("")
def list_jobs(plugin_service: PluginService = Depends(get_plugin_service)):
    """Stream every registered job as one JSON document per line."""
    def stream() -> Iterator[str]:
        for descriptor in plugin_service.list_jobs():
            yield descriptor.model_dump_json() + "\n"

    return StreamingResponse(stream(), media_type=JOB_STREAM_MEDIA_TYPE)


@router.post("/execute", response_model=JobResult, responses={404: {"model": ErrorResponse}})
def execute_job(
    descriptor: JobDescriptor,
    plugin_service: PluginService = Depends(get_plugin_service)
):
    """
    Execute one job. Sync route: handlers block, so it runs in the threadpool.

    An unknown id raises JobNotFoundError, rendered by the app's ServiceError handler.
    """
    return plugin_service.execute_job(descriptor)
