"""Domain entities for job declarations and the registered catalog."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..models.enums import InputType
from .handlers import HandlerLike, JobHandler, as_job_handler


@dataclass(frozen=True)
class Argument:
    """An argument a job asks the orchestrator to collect."""
    description: str
    type: InputType
    key: str
    value: str = ""
    
    def __post_init__(self):
        if not self.key or not isinstance(self.key, str):
            raise ValueError("Argument key must be a non-empty string")
        object.__setattr__(self, "type", InputType(self.type))


@dataclass(frozen=True)
class ManualInteraction:
    """A confirmation or input step required before the job may run."""
    description: str
    type: InputType
    value: str = ""
    
    def __post_init__(self):
        object.__setattr__(self, "type", InputType(self.type))


@dataclass
class Job:
    """
    Caller-authored job declaration.
    
    Titles must be unique ignoring case. depends_on lists the titles of other
    jobs, also matched ignoring case.
    """
    title: str
    handler: HandlerLike
    description: str = ""
    depends_on: List[str] = field(default_factory=list)
    arguments: List[Argument] = field(default_factory=list)
    interaction: Optional[ManualInteraction] = None
    
    def __post_init__(self):
        if not self.title or not isinstance(self.title, str):
            raise ValueError("Job title must be a non-empty string")
        self.handler = as_job_handler(self.handler)

        if not isinstance(self.depends_on, (list, tuple)):
            raise TypeError(
                f"Job '{self.title}' depends_on must be a list of titles, "
                f"got {type(self.depends_on).__name__}"
            )
        for dependency in self.depends_on:
            if not dependency or not isinstance(dependency, str):
                raise ValueError(f"Job '{self.title}' has an empty or non-string dependency: {dependency!r}")

        if not isinstance(self.arguments, (list, tuple)):
            raise TypeError(
                f"Job '{self.title}' arguments must be a list of Argument, "
                f"got {type(self.arguments).__name__}"
            )
        for argument in self.arguments:
            if not isinstance(argument, Argument):
                raise TypeError(
                    f"Job '{self.title}' argument must be an Argument, got {type(argument).__name__}"
                )

        if self.interaction is not None and not isinstance(self.interaction, ManualInteraction):
            raise TypeError(
                f"Job '{self.title}' interaction must be a ManualInteraction, "
                f"got {type(self.interaction).__name__}"
            )


@dataclass(frozen=True)
class RegisteredJob:
    """Immutable, id-addressed form of a job held by the registry."""
    id: int
    title: str
    description: str
    depends_on_ids: Tuple[int, ...]
    arguments: Tuple[Argument, ...]
    interaction: Optional[ManualInteraction]
    handler: JobHandler = field(compare=False, repr=False)
    
    def default_arguments(self) -> dict:
        """Return declared argument defaults keyed by argument key."""
        return {argument.key: argument.value for argument in self.arguments}
