"""Pydantic schemas for the plugin wire protocol."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .enums import InputType

UINT32_MAX = 0xFFFFFFFF


class ArgumentSpec(BaseModel):
    description: str = Field(default="", description="Human-readable argument description")
    type: InputType = Field(..., description="Input kind rendered by the orchestrator")
    key: str = Field(..., min_length=1, description="Argument key passed to the handler")
    value: str = Field(default="", description="Default on listing, bound value on execution")


class ManualInteractionSpec(BaseModel):
    description: str = Field(default="", description="Prompt shown to the user")
    type: InputType = Field(..., description="Input kind rendered by the orchestrator")
    value: str = Field(default="", description="Value supplied by the user")


class JobDescriptor(BaseModel):
    id: int = Field(..., ge=0, le=UINT32_MAX, description="FNV-1a hash of the job title")
    title: str = Field(default="", description="Job title")
    description: str = Field(default="", description="Job description")
    depends_on_ids: List[int] = Field(default_factory=list, description="Identifiers of dependency jobs")
    arguments: List[ArgumentSpec] = Field(default_factory=list)
    interaction: Optional[ManualInteractionSpec] = None
    
    def bound_arguments(self) -> Dict[str, str]:
        """Return argument values keyed by argument key."""
        return {argument.key: argument.value for argument in self.arguments}


class JobResult(BaseModel):
    unique_id: int = Field(..., ge=0, le=UINT32_MAX, description="Identifier of the executed job")
    failed: bool = False
    exit_pipeline: bool = False
    message: str = ""


class ErrorResponse(BaseModel):
    message: str
    code: Optional[str] = None
