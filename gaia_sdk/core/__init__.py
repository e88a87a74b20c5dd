"""Core constants and exceptions."""

from .exceptions import (
    ServiceError,
    ConfigurationError,
    DuplicateJobError,
    UnresolvedDependencyError,
    JobNotFoundError,
    PluginClientError,
    PipelineSignal,
    ExitPipeline,
    JobFailed,
    service_error_handler
)

__all__ = [
    "ServiceError",
    "ConfigurationError",
    "DuplicateJobError",
    "UnresolvedDependencyError",
    "JobNotFoundError",
    "PluginClientError",
    "PipelineSignal",
    "ExitPipeline",
    "JobFailed",
    "service_error_handler"
]
