"""Tests for the bounded worker pool."""

import threading
import time
import pytest
from tainted.selection.pool import WorkerPool


class TestWorkerPool:
    
    def test_results_keyed_by_item(self):
        results = WorkerPool(4).run(lambda x: x * 2, [1, 2, 3])
        assert results == {1: 2, 2: 4, 3: 6}
    
    def test_concurrency_bounded(self):
        active = 0
        peak = 0
        lock = threading.Lock()
        
        def task(_):
            nonlocal active, peak
            with lock:
                active += 1
                peak = max(peak, active)
            time.sleep(0.01)
            with lock:
                active -= 1
        
        WorkerPool(3).run(task, range(20))
        
        assert peak <= 3
    
    def test_failure_propagates_after_drain(self):
        finished = []
        
        def task(x):
            if x == 0:
                raise ValueError("boom")
            time.sleep(0.01)
            finished.append(x)
        
        with pytest.raises(ValueError, match="boom"):
            WorkerPool(2).run(task, range(50))
        
        assert len(finished) < 49
    
    def test_default_worker_count(self):
        assert WorkerPool().workers >= 1
        assert WorkerPool(0).workers >= 1
