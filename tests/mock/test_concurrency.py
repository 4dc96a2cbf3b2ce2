import threading
from collections import Counter

from sz_mock import SzEngine, SzProduct
from sz_observing import NullObserver

THREADS = 16


def _run_all(targets):
    """Start every target together and return the exceptions they raised."""
    errors = []
    barrier = threading.Barrier(len(targets))

    def guarded(target):
        barrier.wait()
        try:
            target()
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=guarded, args=(t,)) for t in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(10)
    assert not any(thread.is_alive() for thread in threads)
    return errors


def test_register_unregister_churn_during_calls_leaves_empty_registry():
    """Ensure racing registrations, removals and calls never fail or leak observers.

    Returns:
        None
    """
    engine = SzEngine(get_stats_result='{"workload":{}}')
    done = threading.Event()

    def churn(index):
        def run():
            observer = NullObserver(f"churn-{index}")
            for _ in range(20):
                engine.register_observer(observer)
                engine.unregister_observer(observer)

        return run

    stats = set()

    def call_loop():
        while not done.is_set():
            stats.add(engine.get_stats())

    caller = threading.Thread(target=call_loop)
    caller.start()
    try:
        errors = _run_all([churn(i) for i in range(THREADS)])
    finally:
        done.set()
        caller.join(10)

    assert errors == []
    assert not caller.is_alive()
    assert stats == {'{"workload":{}}'}
    assert not engine.has_observers()
    assert engine._observers is None


def test_steady_observer_sees_every_racing_registration(recorder):
    product = SzProduct()
    product.register_observer(recorder)
    assert recorder.next_event().event_code == 8702

    def churn(index):
        def run():
            observer = NullObserver(f"churn-{index}")
            product.register_observer(observer)
            product.unregister_observer(observer)

        return run

    assert _run_all([churn(i) for i in range(THREADS)]) == []

    codes = Counter(recorder.next_event().event_code for _ in range(2 * THREADS))
    assert codes == {8702: THREADS, 8704: THREADS}
    recorder.assert_no_event()
    assert [o.observer_id for o in product._observers.observers()] == [recorder.observer_id]


def test_logger_created_once_under_contention():
    engine = SzEngine()
    loggers = []

    def fetch():
        loggers.append(engine._get_logger())

    assert _run_all([fetch] * THREADS) == []
    assert len(loggers) == THREADS
    assert len({id(logger) for logger in loggers}) == 1


def test_set_log_level_from_many_threads_settles_on_a_valid_level():
    engine = SzEngine()
    levels = ["TRACE", "DEBUG", "INFO", "WARN"]

    def switch(level):
        return lambda: [engine.set_log_level(level) for _ in range(10)]

    assert _run_all([switch(levels[i % len(levels)]) for i in range(THREADS)]) == []
    assert engine._get_logger().get_log_level() in levels
