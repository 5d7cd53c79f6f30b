"""Select candidate packages whose closure touches a changed directory."""

import threading
from typing import Dict, Iterable, Optional, Set
from ..contracts.selection import CandidateOutcome, CandidateState, FailurePolicy, SelectionResult
from ..resolve.resolver import ImportResolver
from ..utils.errors import ResolutionError
from ..utils.logging import get_logger
from .paths import PathNormalizer, SubtreeFilter, normalize_dir
from .pool import WorkerPool

logger = get_logger("selection.selector")


class ImpactSelector:
    """Fan the resolver out over candidates and aggregate affected ones."""
    
    def __init__(
        self,
        resolver: ImportResolver,
        normalizer: Optional[PathNormalizer] = None,
        subtree: Optional[SubtreeFilter] = None,
        workers: Optional[int] = None,
        failure_policy: FailurePolicy = FailurePolicy.FAIL,
        include_self: bool = False
    ):
        self.resolver = resolver
        self.normalizer = normalizer or PathNormalizer()
        self.subtree = subtree or SubtreeFilter()
        self.pool = WorkerPool(workers)
        self.failure_policy = FailurePolicy(failure_policy)
        self.include_self = include_self
        self._last_run: Optional["_SelectionRun"] = None
    
    def select(self, candidates: Iterable[str], changed_dirs: Iterable[str], dir: str = ".") -> SelectionResult:
        """
        Compute the affected candidates.
        
        Every candidate is resolved, even ones outside the subtree filter, but
        only candidates inside the filter are reported.
        
        Args:
            candidates: Candidate import paths (duplicates and blanks ignored)
            changed_dirs: Root-relative changed directories
            dir: Lookup context directory for candidates
            
        Returns:
            SelectionResult with sorted, deduplicated selection
            
        Raises:
            ResolutionError: Under the fail policy, if any closure cannot be resolved
        """
        unique = sorted({c.strip() for c in candidates if c and c.strip()})
        changed = {normalize_dir(d) for d in changed_dirs} - {""}
        
        run = _SelectionRun(unique)
        self._last_run = run
        
        if not changed:
            logger.info(f"No changed directories, nothing to select from {len(unique)} candidates")
            return SelectionResult(candidate_count=len(unique))
        
        outcomes = self.pool.run(lambda c: self._evaluate(run, c, changed, dir), unique)
        
        cache = self.resolver.cache
        result = SelectionResult(
            selected=sorted(run.selected),
            uncertain=sorted(run.uncertain),
            changed_directories=sorted(changed),
            candidate_count=len(unique),
            cache_hits=cache.hits,
            cache_misses=cache.misses,
            outcomes=[outcomes[c] for c in unique],
        )
        logger.info(
            f"Selected {len(result.selected)} of {len(unique)} candidates "
            f"({len(changed)} changed directories, {cache.misses} catalog queries, {cache.hits} cache hits)"
        )
        return result
    
    def state(self, candidate: str) -> Optional[CandidateState]:
        """State of candidate in the most recent select() call."""
        run = self._last_run
        return run.state(candidate) if run is not None else None
    
    def _evaluate(self, run: "_SelectionRun", candidate: str, changed: Set[str], dir: str) -> CandidateOutcome:
        run.set_state(candidate, CandidateState.RESOLVING)
        try:
            closure = self.resolver.resolve(candidate, dir)
        except ResolutionError as e:
            run.set_state(candidate, CandidateState.FAILED)
            if self.failure_policy == FailurePolicy.FAIL:
                raise
            in_subtree = self.subtree.matches(self.normalizer.strip_prefix(candidate))
            logger.warning(f"Selecting {candidate} because its dependencies are unknown: {e}")
            if in_subtree:
                run.add_uncertain(candidate)
            return CandidateOutcome(
                import_path=candidate,
                state=CandidateState.FAILED,
                in_subtree=in_subtree,
                error=str(e),
            )
        
        cache = self.resolver.cache
        candidate_dir = self.normalizer.import_path_dir(candidate, cache.get(candidate))
        in_subtree = self.subtree.matches(candidate_dir)
        
        touched = {self.normalizer.import_path_dir(p, cache.get(p)) for p in closure}
        if self.include_self:
            touched.add(candidate_dir)
        hits = sorted(touched & changed)
        
        state = CandidateState.MATCHED if hits else CandidateState.UNMATCHED
        run.set_state(candidate, state)
        if hits and in_subtree:
            run.add_selected(candidate)
        
        return CandidateOutcome(
            import_path=candidate,
            state=state,
            in_subtree=in_subtree,
            closure_size=len(closure),
            matched_directories=hits,
        )


class _SelectionRun:
    """Aggregates owned by one select() call, guarded by a lock."""
    
    def __init__(self, candidates: Iterable[str]):
        self._lock = threading.Lock()
        self.selected: Set[str] = set()
        self.uncertain: Set[str] = set()
        self._states: Dict[str, CandidateState] = {c: CandidateState.PENDING for c in candidates}
    
    def state(self, candidate: str) -> Optional[CandidateState]:
        with self._lock:
            return self._states.get(candidate)
    
    def set_state(self, candidate: str, state: CandidateState) -> None:
        with self._lock:
            self._states[candidate] = state
    
    def add_selected(self, candidate: str) -> None:
        with self._lock:
            self.selected.add(candidate)
    
    def add_uncertain(self, candidate: str) -> None:
        with self._lock:
            self.uncertain.add(candidate)
            self.selected.add(candidate)
