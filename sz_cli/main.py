"""Demonstration CLI exercising the mock Senzing SDK."""
# Example:
# python -m sz_cli.main --action engine --log-level TRACE

from __future__ import annotations

import json
import logging
import sys
import threading
import time
from argparse import (
    ArgumentDefaultsHelpFormatter,
    ArgumentParser,
    RawDescriptionHelpFormatter,
)
from typing import Callable, Dict, List

from sz_mock import SzAbstractFactory, configure_logging, data1
from sz_mock.config import load_config
from sz_mock.envelope import SzMockBase
from sz_observing import HttpObserver, NullObserver, Observer
from sz_shared import LOG_LEVEL_NAMES, SZ_WITH_INFO, SzError

OBSERVER_ID = "sz-cli"

# Names given to threads by the envelope and the observer registry.
_NOTIFICATION_THREAD_PREFIXES = ("sz-notify-", "sz-observer-")


# Combine both formatters to allow newlines and showing default arguments
class RawDescriptionDefaultsHelpFormatter(
    RawDescriptionHelpFormatter,
    ArgumentDefaultsHelpFormatter,
):
    pass


def _run_config(factory: SzAbstractFactory, facades: List[SzMockBase]) -> dict:
    config = factory.create_config()
    facades.append(config)
    return {
        "add_data_source": config.add_data_source("CUSTOMERS"),
        "get_data_sources": config.get_data_sources(),
    }


def _run_engine(factory: SzAbstractFactory, facades: List[SzMockBase]) -> dict:
    engine = factory.create_engine()
    facades.append(engine)
    record = json.dumps({"RECORD_TYPE": "PERSON", "PRIMARY_NAME_FULL": "Robert Smith"})
    return {
        "add_record": engine.add_record("CUSTOMERS", "1001", record, SZ_WITH_INFO),
        "get_entity_by_record_id": engine.get_entity_by_record_id("CUSTOMERS", "1001"),
        "count_redo_records": engine.count_redo_records(),
        "export_json_entity_report": [fragment.value for fragment in engine.export_json_entity_report_iterator()],
    }


def _run_product(factory: SzAbstractFactory, facades: List[SzMockBase]) -> dict:
    product = factory.create_product()
    facades.append(product)
    return {"get_version": product.get_version(), "get_license": product.get_license()}


def _run_diagnostic(factory: SzAbstractFactory, facades: List[SzMockBase]) -> dict:
    diagnostic = factory.create_diagnostic()
    facades.append(diagnostic)
    return {
        "get_datastore_info": diagnostic.get_datastore_info(),
        "check_datastore_performance": diagnostic.check_datastore_performance(1),
    }


def _run_demo(factory: SzAbstractFactory, facades: List[SzMockBase]) -> dict:
    results = _run_product(factory, facades)
    results.update(_run_engine(factory, facades))
    return results


ACTIONS: Dict[str, Callable[[SzAbstractFactory, List[SzMockBase]], dict]] = {
    "demo": _run_demo,
    "config": _run_config,
    "engine": _run_engine,
    "product": _run_product,
    "diagnostic": _run_diagnostic,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for exercising the mock SDK.

    Args:
        argv: Optional list of arguments (defaults to ``sys.argv``).

    Returns:
        int: Process exit code (0 on success, non-zero on error).
    """
    parser = ArgumentParser(
        description="Mock Senzing SDK demonstration.\n\n"
        + "Creates façades from canned test data, registers an observer and prints the canned results.\n"
        + "To see a demo with standard values, execute: python -m sz_cli.main --action demo",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
    )
    parser.add_argument("--config", default=None, help="YAML configuration file (default: $SENZING_MOCK_CONFIG)")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_NAMES,
        default=None,
        help="Log level applied to logging and to every façade; TRACE enables entry/exit traces",
    )
    parser.add_argument("--observer-url", default=None, help="POST events to this URL instead of logging them")
    parser.add_argument("--origin", default=None, help="Origin tag carried by observer events")
    parser.add_argument("--action", choices=sorted(ACTIONS), help="Demonstration to run")
    parser.add_argument(
        "--linger",
        type=float,
        default=0.5,
        help="Maximum seconds to wait for background observer notifications before exiting",
    )

    args = parser.parse_args(argv)
    if args.action is None:
        # No action selected, show help
        parser.print_help()
        return 1

    settings = load_config(args.config)
    log_level = args.log_level or settings.get("log_level")
    log = configure_logging(log_level)

    observer: Observer | None = None
    facades: List[SzMockBase] = []
    log.debug("Handling action: %s", args.action)
    try:
        factory = SzAbstractFactory.from_settings(settings)
        if "test_data" not in settings:
            factory.test_data = data1()
        if args.origin:
            factory.observer_origin = args.origin

        if args.observer_url:
            observer = HttpObserver(OBSERVER_ID, args.observer_url)
        else:
            observer = NullObserver(OBSERVER_ID, is_silent=False)

        results = ACTIONS[args.action](_Registering(factory, observer, log_level), facades)
        print(json.dumps(results, indent=2))
        for facade in facades:
            facade.unregister_observer(observer)
        return 0
    except SzError as exc:
        sys.stderr.write(f"Mock SDK error: {exc}\n")
        return 1
    except ValueError as exc:
        sys.stderr.write(f"Invalid configuration: {exc}\n")
        return 1
    finally:
        _wait_for_notifications(args.linger)
        if args.observer_url and observer is not None:
            observer.close()


def _wait_for_notifications(timeout: float) -> None:
    """Join background notification threads, giving up after ``timeout`` seconds.

    Notifier threads start per-observer delivery threads, so the scan repeats
    until none of either kind is alive.
    """
    deadline = time.monotonic() + timeout
    while True:
        pending = [t for t in threading.enumerate() if t.name.startswith(_NOTIFICATION_THREAD_PREFIXES)]
        remaining = deadline - time.monotonic()
        if not pending or remaining <= 0:
            if pending:
                logging.getLogger("sz_cli").warning(
                    "%d observer notification(s) still running after %.1fs", len(pending), timeout
                )
            return
        pending[0].join(remaining)


class _Registering:
    """Factory wrapper attaching the observer and log level to every façade it creates."""

    def __init__(self, factory: SzAbstractFactory, observer: Observer, log_level: str | None):
        self._factory = factory
        self._observer = observer
        self._log_level = log_level if log_level in LOG_LEVEL_NAMES else None

    def __getattr__(self, name: str):
        create = getattr(self._factory, name)
        if not name.startswith("create_"):
            return create

        def wrapped(*args, **kwargs):
            facade = create(*args, **kwargs)
            if self._log_level:
                facade.set_log_level(self._log_level)
            facade.register_observer(self._observer)
            logging.getLogger("sz_cli").debug("Registered %r on %s", self._observer, type(facade).__name__)
            return facade

        return wrapped


if __name__ == "__main__":
    sys.exit(main())
