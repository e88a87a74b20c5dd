"""Service modules for the plugin."""

from .job_registry import JobRegistry
from .dispatcher import ExecutionDispatcher
from .plugin_service import PluginService, job_to_descriptor, outcome_to_result

__all__ = ["JobRegistry", "ExecutionDispatcher", "PluginService", "job_to_descriptor", "outcome_to_result"]
