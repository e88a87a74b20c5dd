"""Models and data structures for the plugin protocol."""

from .enums import InputType, OutcomeKind
from .schemas import ArgumentSpec, ManualInteractionSpec, JobDescriptor, JobResult, ErrorResponse

__all__ = [
    "InputType",
    "OutcomeKind",
    "ArgumentSpec",
    "ManualInteractionSpec",
    "JobDescriptor",
    "JobResult",
    "ErrorResponse"
]
