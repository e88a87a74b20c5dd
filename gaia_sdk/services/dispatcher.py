"""Execution dispatcher: runs one job and classifies its outcome."""

from typing import Dict, Mapping, Optional

import structlog

from ..core.exceptions import ExitPipeline, JobFailed
from ..domain.entities import RegisteredJob
from ..domain.outcomes import FailedExit, NotFound, Outcome, SoftExit, Success
from .job_registry import JobRegistry

logger = structlog.get_logger(__name__)


class ExecutionDispatcher:
    """Looks up jobs by id and invokes their handlers."""
    
    def __init__(self, registry: JobRegistry):
        self.registry = registry
    
    @staticmethod
    def bind_arguments(job: RegisteredJob, bound_arguments: Mapping[str, str]) -> Dict[str, str]:
        """
        Merge runtime values over the declared argument defaults.
        
        Declared keys keep their declaration order; keys the job does not
        declare are passed through unchanged after them.
        """
        arguments = job.default_arguments()
        arguments.update(bound_arguments)
        return arguments
    
    def execute(self, job_id: int, bound_arguments: Optional[Mapping[str, str]] = None) -> Outcome:
        """
        Execute a job once, synchronously.
        
        Args:
            job_id: Identifier of the job to run
            bound_arguments: Runtime argument values keyed by argument key
            
        Returns:
            Success, SoftExit, FailedExit or NotFound
        """
        job = self.registry.find_by_id(job_id)
        if job is None:
            logger.warning("Job not found", job_id=job_id)
            return NotFound(job_id)
        
        arguments = self.bind_arguments(job, bound_arguments or {})
        log = logger.bind(job_id=job.id, title=job.title)
        log.info("Executing job", handler=job.handler.name, argument_keys=list(arguments))
        
        try:
            job.handler.execute(arguments)
        except ExitPipeline as signal:
            outcome: Outcome = SoftExit(signal.message)
        except JobFailed as signal:
            outcome = FailedExit(signal.message)
        except Exception as e:
            # Unexpected handler errors fail the job instead of the request
            log.exception("Job handler raised an unexpected error")
            outcome = FailedExit(str(e) or type(e).__name__)
        else:
            outcome = Success()
        
        log.info("Job finished", outcome=outcome.kind.value)
        return outcome
