from concurrent.futures import ThreadPoolExecutor
import threading
import time

import pytest

import httpcodes
from httpcodes.util.sync import RWLock

_THREADS = 16
_TIMEOUT = 5


def _wait_for(condition, timeout=_TIMEOUT):
    deadline = time.monotonic() + timeout
    while not condition():
        if time.monotonic() > deadline:
            pytest.fail('timed out waiting for condition')
        time.sleep(0.001)


class TestRegistryContention:
    @pytest.mark.parametrize('attempt', range(5))
    def test_same_key_single_winner(self, status_registry, attempt):
        barrier = threading.Barrier(_THREADS)
        descriptions = ['description {}'.format(i) for i in range(_THREADS)]

        def register(description):
            barrier.wait(timeout=_TIMEOUT)
            return status_registry.register(599, description)

        with ThreadPoolExecutor(max_workers=_THREADS) as executor:
            results = list(executor.map(register, descriptions))

        assert results.count(True) == 1
        winner = descriptions[results.index(True)]
        assert status_registry.lookup(599) == winner
        assert len(status_registry) == 56

    def test_same_method_single_winner(self, method_registry):
        barrier = threading.Barrier(_THREADS)

        def register(index):
            barrier.wait(timeout=_TIMEOUT)
            return method_registry.register('PURGE', 'purge {}'.format(index))

        with ThreadPoolExecutor(max_workers=_THREADS) as executor:
            results = list(executor.map(register, range(_THREADS)))

        assert results.count(True) == 1
        assert method_registry.lookup('PURGE') == 'purge {}'.format(results.index(True))

    def test_disjoint_keys(self, method_registry):
        tokens = ['CUSTOM-{}'.format(i) for i in range(200)]

        def churn(token):
            assert method_registry.register(token, token.lower())
            if token.endswith(('0', '5')):
                assert method_registry.delete(token)

        with ThreadPoolExecutor(max_workers=_THREADS) as executor:
            list(executor.map(churn, tokens))

        kept = [token for token in tokens if not token.endswith(('0', '5'))]
        snapshot = method_registry.snapshot()
        assert len(snapshot) == 9 + len(kept)
        for token in kept:
            assert snapshot[token] == token.lower()

    def test_readers_during_writes(self, status_registry):
        standard = {
            httpcodes.format_entry(code, description)
            for code, description in httpcodes.STATUS_DESCRIPTIONS.items()
        }
        stop = threading.Event()
        errors = []

        def write():
            while not stop.is_set():
                for code in range(520, 530):
                    status_registry.register(code, 'custom {}'.format(code))
                for code in range(520, 530):
                    status_registry.delete(code)

        def read():
            for __ in range(200):
                lines = status_registry.dump().splitlines()
                if len(lines) != len(set(lines)) or not standard <= set(lines):
                    errors.append(lines)
                if status_registry.lookup(404) != httpcodes.NOT_FOUND_DESC:
                    errors.append(404)

        writer = threading.Thread(target=write)
        writer.start()
        try:
            with ThreadPoolExecutor(max_workers=4) as executor:
                futures = [executor.submit(read) for __ in range(4)]
                for future in futures:
                    future.result()
        finally:
            stop.set()
            writer.join(timeout=_TIMEOUT)

        assert not writer.is_alive()
        assert errors == []
        assert len(status_registry) == 55

    def test_catalog_writers_share_lock(self, catalog):
        def register(index):
            catalog.statuses.register(550 + index % 10, 'status {}'.format(index))
            method = 'M{}'.format(index % 10)
            catalog.methods.register(method, 'method {}'.format(index))

        with ThreadPoolExecutor(max_workers=_THREADS) as executor:
            list(executor.map(register, range(100)))

        assert len(catalog.statuses) == 65
        assert len(catalog.methods) == 19


class TestRWLock:
    def test_readers_share(self):
        lock = RWLock()
        barrier = threading.Barrier(2)

        def read():
            with lock.read_lock():
                # NOTE: Both readers must be inside the lock at once for the
                #   barrier to release.
                barrier.wait(timeout=_TIMEOUT)

        threads = [threading.Thread(target=read) for __ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=_TIMEOUT)

        assert not barrier.broken

    def test_writer_excludes_readers(self):
        lock = RWLock()
        acquired = threading.Event()

        def write():
            with lock.write_lock():
                acquired.set()

        lock.acquire_read()
        writer = threading.Thread(target=write)
        writer.start()

        assert not acquired.wait(timeout=0.05)

        lock.release_read()
        writer.join(timeout=_TIMEOUT)
        assert acquired.is_set()

    def test_writer_excludes_writer(self):
        lock = RWLock()
        acquired = threading.Event()

        def write():
            with lock.write_lock():
                acquired.set()

        lock.acquire_write()
        writer = threading.Thread(target=write)
        writer.start()

        assert not acquired.wait(timeout=0.05)

        lock.release_write()
        writer.join(timeout=_TIMEOUT)
        assert acquired.is_set()

    def test_waiting_writer_goes_before_new_readers(self):
        lock = RWLock()
        order = []

        def write():
            with lock.write_lock():
                order.append('writer')

        def read():
            with lock.read_lock():
                order.append('reader')

        lock.acquire_read()

        writer = threading.Thread(target=write)
        writer.start()
        _wait_for(lambda: lock._writers_waiting == 1)

        reader = threading.Thread(target=read)
        reader.start()
        time.sleep(0.05)
        assert order == []

        lock.release_read()
        writer.join(timeout=_TIMEOUT)
        reader.join(timeout=_TIMEOUT)

        assert order == ['writer', 'reader']

    def test_release_unacquired(self):
        lock = RWLock()

        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_released_on_error(self):
        lock = RWLock()

        with pytest.raises(ZeroDivisionError):
            with lock.write_lock():
                1 / 0

        with lock.read_lock():
            pass
        with lock.write_lock():
            pass

    def test_repr(self):
        lock = RWLock()

        with lock.read_lock():
            assert repr(lock) == '<RWLock readers=1 writer=False>'
