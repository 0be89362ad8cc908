"""Tests for locking and concurrent access."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from src.storage.locks import ReadWriteLock


def test_readers_share_the_lock():
    """Test two readers can hold the lock at once."""
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=5)

    def reader():
        with lock.read():
            both_inside.wait()

    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [pool.submit(reader) for _ in range(2)]
        for future in futures:
            future.result(timeout=5)


def test_writer_excludes_readers():
    """Test a reader waits for an active writer."""
    lock = ReadWriteLock()
    events = []
    writer_inside = threading.Event()

    def writer():
        with lock.write():
            writer_inside.set()
            time.sleep(0.05)
            events.append("write")

    def reader():
        writer_inside.wait(timeout=5)
        with lock.read():
            events.append("read")

    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [pool.submit(writer), pool.submit(reader)]
        for future in futures:
            future.result(timeout=5)

    assert events == ["write", "read"]


def test_concurrent_adds_get_unique_sequential_ids(storage):
    """Test parallel adds never hand out the same id twice."""
    workers, per_worker = 8, 200

    def add_many(worker):
        return [storage.add(f"{worker}-{i}") for i in range(per_worker)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(add_many, range(workers)))

    ids = sorted(entry_id for batch in results for entry_id in batch)
    assert ids == list(range(1, workers * per_worker + 1))
    assert len(storage) == workers * per_worker
    for batch in results:
        assert batch == sorted(batch)


def test_concurrent_mixed_operations(storage):
    """Test readers and writers interleave without corrupting the store."""
    for i in range(100):
        storage.add(i)

    def remove_evens():
        for i in range(0, 100, 2):
            storage.remove_by_value(i)

    def read_all():
        for _ in range(50):
            snapshot, _ = storage.get_all()
            assert all(isinstance(v, int) for v in snapshot.values())

    def append_more():
        for i in range(100, 150):
            storage.add(i)

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [
            pool.submit(remove_evens),
            pool.submit(read_all),
            pool.submit(read_all),
            pool.submit(append_more),
        ]
        for future in futures:
            future.result(timeout=30)

    snapshot, found = storage.get_all()
    assert found is True
    assert len(storage) == 100
    assert sorted(snapshot.values()) == list(range(1, 100, 2)) + list(range(100, 150))
