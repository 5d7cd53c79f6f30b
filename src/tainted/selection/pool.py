"""Bounded worker pool with a single join barrier."""

import os
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import Callable, Dict, Iterable, Optional, TypeVar
from ..utils.logging import get_logger

logger = get_logger("selection.pool")

T = TypeVar("T")
R = TypeVar("R")


def default_worker_count() -> int:
    """One worker per available CPU."""
    return os.cpu_count() or 1


class WorkerPool:
    """
    Run one task per item on at most `workers` threads.
    
    run() returns only after every started task has finished. If any task
    raises, tasks that have not started yet are cancelled and the first
    exception is re-raised after the pool drains.
    """
    
    def __init__(self, workers: Optional[int] = None):
        self.workers = workers if workers and workers > 0 else default_worker_count()
    
    def run(self, func: Callable[[T], R], items: Iterable[T]) -> Dict[T, R]:
        results: Dict[T, R] = {}
        executor = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="tainted")
        try:
            futures: Dict[Future, T] = {executor.submit(func, item): item for item in items}
            done, not_done = wait(futures, return_when=FIRST_EXCEPTION)
            
            failed = [f for f in done if not f.cancelled() and f.exception() is not None]
            if failed:
                for future in not_done:
                    future.cancel()
                logger.debug(f"Task failed, cancelled {len(not_done)} pending tasks")
                wait(not_done)
                failed.sort(key=lambda f: str(futures[f]))
                raise failed[0].exception()
            
            for future in done:
                results[futures[future]] = future.result()
        finally:
            executor.shutdown(wait=True)
        return results
