import threading
import time

from locks import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=2)

    def reader():
        with lock.read():
            both_inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not both_inside.broken


def test_writer_waits_for_readers_and_blocks_new_ones():
    lock = ReadWriteLock()
    events = []

    lock.acquire_read()
    writer = threading.Thread(target=lambda: (lock.acquire_write(), events.append("write"), lock.release_write()))
    writer.start()
    time.sleep(0.05)

    late_reader = threading.Thread(target=lambda: (lock.acquire_read(), events.append("read"), lock.release_read()))
    late_reader.start()
    time.sleep(0.05)
    assert events == []

    lock.release_read()
    writer.join(timeout=2)
    late_reader.join(timeout=2)
    assert events == ["write", "read"]
