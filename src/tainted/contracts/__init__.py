"""Output contracts."""

from .selection import CandidateOutcome, CandidateState, FailurePolicy, SelectionResult

__all__ = ["CandidateOutcome", "CandidateState", "FailurePolicy", "SelectionResult"]
