"""
Job registry: the immutable, id-addressed catalog of jobs.

The registry is built once at startup from the caller's job declarations and
never changes afterwards, so concurrent request handlers read it without
locking.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import structlog

from ..core.exceptions import DuplicateJobError, JobNotFoundError, UnresolvedDependencyError
from ..domain.entities import Job, RegisteredJob
from ..domain.identifiers import job_id_from_title

logger = structlog.get_logger(__name__)


def _title_key(title: str) -> str:
    return title.lower()


class JobRegistry:
    """Read-only catalog of registered jobs, in declaration order."""
    
    def __init__(self, jobs: Tuple[RegisteredJob, ...]):
        self._jobs = jobs
        self._by_id: Mapping[int, RegisteredJob] = MappingProxyType({job.id: job for job in jobs})
    
    @classmethod
    def build(cls, jobs: Iterable[Job]) -> "JobRegistry":
        """
        Validate job declarations and build the registry.
        
        Args:
            jobs: Job declarations in the order they should be listed
            
        Returns:
            Fully populated registry
            
        Raises:
            DuplicateJobError: If two jobs share a title (ignoring case) or an id
            UnresolvedDependencyError: If a dependency names no declared job
            TypeError: If an entry is not a Job
        """
        declarations: List[Job] = list(jobs)
        
        # Assign identifiers and reject duplicates
        by_title: Dict[str, Job] = {}
        by_id: Dict[int, Job] = {}
        ids: List[int] = []
        for job in declarations:
            if not isinstance(job, Job):
                raise TypeError(f"Expected Job declaration, got {type(job).__name__}")
            
            job_id = job_id_from_title(job.title)
            existing = by_title.get(_title_key(job.title)) or by_id.get(job_id)
            if existing is not None:
                raise DuplicateJobError(job.title, existing.title, job_id)
            
            by_title[_title_key(job.title)] = job
            by_id[job_id] = job
            ids.append(job_id)
        
        title_to_id = {key: job_id_from_title(job.title) for key, job in by_title.items()}
        
        registered: List[RegisteredJob] = []
        for job, job_id in zip(declarations, ids):
            depends_on_ids: List[int] = []
            for dependency in job.depends_on:
                dependency_id = title_to_id.get(_title_key(dependency))
                if dependency_id is None:
                    raise UnresolvedDependencyError(job.title, dependency)
                depends_on_ids.append(dependency_id)
            
            registered.append(RegisteredJob(
                id=job_id,
                title=job.title,
                description=job.description,
                depends_on_ids=tuple(depends_on_ids),
                arguments=tuple(job.arguments),
                interaction=job.interaction,
                handler=job.handler
            ))
        
        registry = cls(tuple(registered))
        logger.info("Job registry built", jobs=len(registry), titles=[job.title for job in registered])
        return registry
    
    def list_all(self) -> Tuple[RegisteredJob, ...]:
        """Return all jobs in declaration order."""
        return self._jobs
    
    def find_by_id(self, job_id: int) -> Optional[RegisteredJob]:
        """Return the job with the given id, or None."""
        return self._by_id.get(job_id)
    
    def get_or_raise(self, job_id: int) -> RegisteredJob:
        """
        Return the job with the given id.
        
        Raises:
            JobNotFoundError: If no job carries the id
        """
        job = self.find_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job
    
    def __len__(self) -> int:
        return len(self._jobs)
    
    def __iter__(self) -> Iterator[RegisteredJob]:
        return iter(self._jobs)
    
    def __contains__(self, job_id: object) -> bool:
        return job_id in self._by_id
