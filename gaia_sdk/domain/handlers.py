"""
Job handler interface.

Every declared job carries a handler implementing JobHandler. Plain functions
are accepted too and wrapped in a FunctionHandler.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Union


class JobHandler(ABC):
    """Base class for the unit of work behind a job."""
    
    @property
    def name(self) -> str:
        """Return a readable name for log output."""
        return type(self).__name__
    
    @abstractmethod
    def execute(self, arguments: Dict[str, str]) -> None:
        """
        Run the job with its bound arguments.
        
        Args:
            arguments: Mapping from argument key to runtime value
            
        Raises:
            ExitPipeline: To stop the pipeline without failing the job
            JobFailed: To fail the job and stop the pipeline
        """
        pass


class FunctionHandler(JobHandler):
    """Adapts a plain callable to the JobHandler interface."""
    
    def __init__(self, func: Callable[[Dict[str, str]], object]):
        self.func = func
    
    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", repr(self.func))
    
    def execute(self, arguments: Dict[str, str]) -> None:
        # Return values are ignored
        self.func(arguments)


HandlerLike = Union[JobHandler, Callable[[Dict[str, str]], object]]


def as_job_handler(handler: HandlerLike) -> JobHandler:
    """
    Normalize a handler declaration.
    
    Args:
        handler: JobHandler instance or plain callable
        
    Returns:
        JobHandler wrapping the given handler (the same object if it already is one)
        
    Raises:
        TypeError: If handler is neither a JobHandler nor callable
    """
    if isinstance(handler, JobHandler):
        return handler
    if callable(handler):
        return FunctionHandler(handler)
    raise TypeError(f"Job handler must be a JobHandler or callable, got {type(handler).__name__}")
