"""Domain layer: job entities, handlers, outcomes and identifiers."""

from .entities import Argument, Job, ManualInteraction, RegisteredJob
from .handlers import FunctionHandler, JobHandler, as_job_handler
from .identifiers import job_id_from_title
from .outcomes import FailedExit, NotFound, Outcome, SoftExit, Success

__all__ = [
    "Argument",
    "Job",
    "ManualInteraction",
    "RegisteredJob",
    "FunctionHandler",
    "JobHandler",
    "as_job_handler",
    "job_id_from_title",
    "FailedExit",
    "NotFound",
    "Outcome",
    "SoftExit",
    "Success"
]
