"""Outcome variants produced by a single job execution."""

from dataclasses import dataclass
from typing import Union

from ..models.enums import OutcomeKind


@dataclass(frozen=True)
class Success:
    """Handler returned normally."""
    kind = OutcomeKind.SUCCESS


@dataclass(frozen=True)
class SoftExit:
    """Handler asked to stop the pipeline; the job itself did not fail."""
    message: str
    kind = OutcomeKind.SOFT_EXIT


@dataclass(frozen=True)
class FailedExit:
    """Handler failed; the job is failed and the pipeline stops."""
    message: str
    kind = OutcomeKind.FAILED_EXIT


@dataclass(frozen=True)
class NotFound:
    """No registered job carries the requested identifier."""
    job_id: int
    kind = OutcomeKind.NOT_FOUND


Outcome = Union[Success, SoftExit, FailedExit, NotFound]
