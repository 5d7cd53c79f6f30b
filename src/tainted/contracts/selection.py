"""Pydantic models for selection output (versioned, stable, explicit)."""

from enum import Enum
from typing import List
from pydantic import BaseModel, Field


class CandidateState(str, Enum):
    """Lifecycle of one candidate task."""
    PENDING = "pending"
    RESOLVING = "resolving"
    MATCHED = "matched"
    UNMATCHED = "unmatched"
    FAILED = "failed"


class FailurePolicy(str, Enum):
    """What to do when a candidate's closure cannot be resolved."""
    FAIL = "fail"
    SELECT = "select"


class CandidateOutcome(BaseModel):
    """Terminal state of one candidate after resolution and matching."""
    import_path: str = Field(..., description="Candidate import path")
    state: CandidateState = Field(..., description="Terminal lifecycle state")
    in_subtree: bool = Field(default=True, description="Candidate passes the subtree filter")
    closure_size: int = Field(default=0, ge=0, description="Number of local dependencies")
    matched_directories: List[str] = Field(default_factory=list, description="Changed directories hit by the closure")
    error: str = Field(default="", description="Resolution failure message")
    
    class Config:
        """Pydantic config."""
        use_enum_values = True


class SelectionResult(BaseModel):
    """Selection contract - sorted, deduplicated affected packages."""
    version: str = Field(default="1.0.0", description="Output contract version")
    selected: List[str] = Field(default_factory=list, description="Affected import paths, sorted")
    uncertain: List[str] = Field(default_factory=list, description="Candidates selected because resolution failed")
    changed_directories: List[str] = Field(default_factory=list, description="Changed directories, sorted")
    candidate_count: int = Field(default=0, ge=0, description="Distinct candidates evaluated")
    cache_hits: int = Field(default=0, ge=0, description="Metadata cache hits")
    cache_misses: int = Field(default=0, ge=0, description="Catalog queries issued")
    outcomes: List[CandidateOutcome] = Field(default_factory=list, description="Per-candidate outcomes, sorted by import path")
    
    class Config:
        """Pydantic config."""
        use_enum_values = True
