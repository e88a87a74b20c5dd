"""Plugin SDK for declaring pipeline jobs and serving them to an orchestrator."""

__version__ = "1.0.0"

from .core.exceptions import (
    ConfigurationError,
    DuplicateJobError,
    ExitPipeline,
    JobFailed,
    JobNotFoundError,
    UnresolvedDependencyError,
)
from .domain.entities import Argument, Job, ManualInteraction
from .domain.handlers import JobHandler
from .models.enums import InputType
from .server import serve

__all__ = [
    "Argument",
    "ConfigurationError",
    "DuplicateJobError",
    "ExitPipeline",
    "InputType",
    "Job",
    "JobFailed",
    "JobHandler",
    "JobNotFoundError",
    "ManualInteraction",
    "UnresolvedDependencyError",
    "serve"
]
