"""Enumerations shared by job declarations and the wire schemas."""

from enum import Enum


class InputType(str, Enum):
    """Kind of input the orchestrator renders for an argument."""
    TEXT_FIELD = "textfield"
    TEXT_AREA = "textarea"
    BOOLEAN = "boolean"
    SECRET = "vault"


class OutcomeKind(Enum):
    """Classification of a single job execution."""
    SUCCESS = "success"
    SOFT_EXIT = "soft_exit"
    FAILED_EXIT = "failed_exit"
    NOT_FOUND = "not_found"
