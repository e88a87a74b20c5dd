"""Custom exceptions for the plugin SDK."""

from typing import Optional, Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse

from .constants import EXIT_PIPELINE_MESSAGE, JOB_NOT_FOUND_MESSAGE


class ServiceError(Exception):
    """Base exception for service layer errors."""
    
    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {"message": self.message}
        if self.code:
            result["code"] = self.code
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(ServiceError):
    """Raised when the plugin cannot start with the supplied jobs or settings."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class DuplicateJobError(ConfigurationError):
    """Raised when two jobs share a title (case-insensitive) or an identifier."""
    def __init__(self, title: str, other_title: str, job_id: int):
        message = (
            f"duplicate job found (two jobs with same title): "
            f"'{title}' and '{other_title}' both map to id {job_id}"
        )
        super().__init__(message, details={"title": title, "other_title": other_title, "id": job_id})
        self.title = title
        self.other_title = other_title
        self.job_id = job_id


class UnresolvedDependencyError(ConfigurationError):
    """Raised when a job depends on a title no declared job carries."""
    def __init__(self, job_title: str, dependency_title: str):
        message = f"job '{job_title}' has dependency '{dependency_title}' which is not declared"
        super().__init__(message, details={"job": job_title, "dependency": dependency_title})
        self.job_title = job_title
        self.dependency_title = dependency_title


class JobNotFoundError(ServiceError):
    """Raised when an execute call names an identifier the plugin does not know."""
    def __init__(self, job_id: Optional[int] = None):
        super().__init__(JOB_NOT_FOUND_MESSAGE, code="CANCELLED")
        self.job_id = job_id


class PluginClientError(ServiceError):
    """Raised by the orchestrator-side client when a plugin call fails."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message, code="CLIENT_ERROR", details=details)
        self.status_code = status_code


class PipelineSignal(Exception):
    """Base for conditions a job handler raises to steer the pipeline."""
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExitPipeline(PipelineSignal):
    """Stop the rest of the pipeline without failing the current job."""
    def __init__(self, message: str = EXIT_PIPELINE_MESSAGE):
        super().__init__(message)


class JobFailed(PipelineSignal):
    """Fail the current job and stop the rest of the pipeline."""
    pass


def service_error_handler(error: ServiceError) -> JSONResponse:
    """Convert service errors to protocol error responses."""
    status_map = {
        JobNotFoundError: status.HTTP_404_NOT_FOUND,
        ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
        DuplicateJobError: status.HTTP_500_INTERNAL_SERVER_ERROR,
        UnresolvedDependencyError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    }
    
    status_code = status_map.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    
    return JSONResponse(
        status_code=status_code,
        content=error.to_dict()
    )
