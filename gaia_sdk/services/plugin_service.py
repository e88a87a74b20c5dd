"""Plugin service: the list/execute surface offered to the orchestrator."""

from typing import Iterator, Optional

from ..core.exceptions import JobNotFoundError
from ..domain.entities import RegisteredJob
from ..domain.outcomes import FailedExit, NotFound, Outcome, SoftExit
from ..models.schemas import ArgumentSpec, JobDescriptor, JobResult, ManualInteractionSpec
from .dispatcher import ExecutionDispatcher
from .job_registry import JobRegistry


def job_to_descriptor(job: RegisteredJob) -> JobDescriptor:
    """Serialize a registered job to its wire descriptor."""
    interaction = None
    if job.interaction is not None:
        interaction = ManualInteractionSpec(
            description=job.interaction.description,
            type=job.interaction.type,
            value=job.interaction.value
        )
    
    return JobDescriptor(
        id=job.id,
        title=job.title,
        description=job.description,
        depends_on_ids=list(job.depends_on_ids),
        arguments=[
            ArgumentSpec(
                description=argument.description,
                type=argument.type,
                key=argument.key,
                value=argument.value
            )
            for argument in job.arguments
        ],
        interaction=interaction
    )


def outcome_to_result(job_id: int, outcome: Outcome) -> JobResult:
    """
    Map an execution outcome to the protocol result.
    
    Raises:
        JobNotFoundError: For NotFound outcomes, which carry no result body
    """
    if isinstance(outcome, NotFound):
        raise JobNotFoundError(outcome.job_id)
    if isinstance(outcome, SoftExit):
        return JobResult(unique_id=job_id, failed=False, exit_pipeline=True, message=outcome.message)
    if isinstance(outcome, FailedExit):
        return JobResult(unique_id=job_id, failed=True, exit_pipeline=True, message=outcome.message)
    return JobResult(unique_id=job_id, failed=False, exit_pipeline=False)


class PluginService:
    """Adapts the registry and dispatcher to the two remote operations."""
    
    def __init__(self, registry: JobRegistry, dispatcher: Optional[ExecutionDispatcher] = None):
        self.registry = registry
        self.dispatcher = dispatcher or ExecutionDispatcher(registry)
    
    def list_jobs(self) -> Iterator[JobDescriptor]:
        """Yield a descriptor for every registered job, in registry order."""
        for job in self.registry.list_all():
            yield job_to_descriptor(job)
    
    def execute_job(self, descriptor: JobDescriptor) -> JobResult:
        """
        Execute the job named by the descriptor's id.
        
        Args:
            descriptor: Job descriptor whose argument values are the bound values
            
        Returns:
            JobResult describing success, soft exit or failure
            
        Raises:
            JobNotFoundError: If the id matches no registered job
        """
        outcome = self.dispatcher.execute(descriptor.id, descriptor.bound_arguments())
        return outcome_to_result(descriptor.id, outcome)
