"""Instrumented call envelope shared by every SDK façade.

Every façade operation is described by an :class:`Operation` and wrapped with
:func:`instrumented` (or :func:`instrumented_iterator` for export iterators).
The wrapper applies the same sequence around the method body:

1. entry trace, when the façade's log level is TRACE;
2. the body, which returns the canned value;
3. observer notification on a background thread, when observers exist;
4. exit trace with the result, error and elapsed time, from a ``finally``.
"""

from __future__ import annotations

import functools
import inspect
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from sz_observing import notifier
from sz_observing.observer import Observer
from sz_observing.subject import SimpleSubject
from sz_shared.constants import (
    EVENT_REGISTER_OBSERVER,
    EVENT_SET_LOG_LEVEL,
    EVENT_UNREGISTER_OBSERVER,
    LEVEL_TRACE_NAME,
)
from sz_shared.errors import SzBadInputError

from . import helper
from .context import Context, is_cancelled
from .logging_config import SzLogger, log

# Canned value kinds and their zero values.
INT64 = "int64"
STRING = "string"
HANDLE = "handle"

ZERO_VALUES: Dict[str, Any] = {INT64: 0, STRING: "", HANDLE: 0}

DetailsRedactor = Callable[[str, Dict[str, str]], Mapping[str, str]]


@dataclass(frozen=True)
class Operation:
    """Static description of one instrumented operation."""

    name: str
    trace_entry: int
    event_code: int
    details: Tuple[Tuple[str, str], ...] = ()
    include_return: bool = False

    @property
    def trace_exit(self) -> int:
        return self.trace_entry + 1


def details(**pairs: str) -> Tuple[Tuple[str, str], ...]:
    """Map observer detail keys to parameter names, preserving order."""
    return tuple(pairs.items())


class StringFragment(NamedTuple):
    """One element of an export iterator."""

    value: str
    error: Optional[BaseException] = None


REGISTER_OBSERVER = Operation("register_observer", 703, EVENT_REGISTER_OBSERVER, details(observerID="observer_id"))
SET_LOG_LEVEL = Operation("set_log_level", 705, EVENT_SET_LOG_LEVEL, details(logLevelName="log_level_name"))
UNREGISTER_OBSERVER = Operation("unregister_observer", 707, EVENT_UNREGISTER_OBSERVER, details(observerID="observer_id"))

COMMON_OPERATIONS = (REGISTER_OBSERVER, SET_LOG_LEVEL, UNREGISTER_OBSERVER)


class _Outcome:
    """Result and error of a traced call, filled in by the call body."""

    __slots__ = ("result", "error")

    def __init__(self):
        self.result: Any = None
        self.error: Optional[BaseException] = None


def instrumented(operation: Operation):
    """Wrap a façade method with the call envelope described by ``operation``."""

    def decorator(method):
        signature = inspect.signature(method)

        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            arguments, ctx = _bind(signature, self, args, kwargs)
            return self._run(operation, arguments, ctx, lambda: method(self, *args, **kwargs))

        wrapper.operation = operation
        return wrapper

    return decorator


def instrumented_iterator(operation: Operation):
    """Wrap a method returning fragments into a lazy, instrumented generator.

    Nothing happens until the first ``next()``: entry tracing and the single
    observer notification are deferred to that point, and the exit trace runs
    once the generator is exhausted, fails or is closed.
    """

    def decorator(method):
        signature = inspect.signature(method)

        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            arguments, ctx = _bind(signature, self, args, kwargs)
            return self._run_iterator(operation, arguments, ctx, lambda: method(self, *args, **kwargs))

        wrapper.operation = operation
        return wrapper

    return decorator


def _bind(signature: inspect.Signature, instance, args, kwargs) -> Tuple[Dict[str, Any], Optional[Context]]:
    """Bind call arguments by parameter name, splitting off ``ctx``."""
    bound = signature.bind(instance, *args, **kwargs)
    bound.apply_defaults()
    arguments = dict(bound.arguments)
    arguments.pop("self", None)
    ctx = arguments.pop("ctx", None)
    return arguments, ctx


class SzMockBase:
    """Cross-cutting state and behavior shared by the five façades.

    Subclasses set ``COMPONENT_ID``, ``CANNED_FIELDS`` (canned attribute name
    to kind) and ``ID_MESSAGES``.
    """

    COMPONENT_ID: int = 0
    CANNED_FIELDS: Dict[str, str] = {}
    ID_MESSAGES: Dict[int, str] = {}

    def __init__(self, **canned: Any):
        """Initialize the façade with canned return values.

        Args:
            **canned: Values keyed by canned field name; omitted fields hold
                the zero value of their kind.

        Raises:
            TypeError: If a keyword is not a canned field of this façade.
        """
        unknown = sorted(set(canned) - set(self.CANNED_FIELDS))
        if unknown:
            raise TypeError(f"{type(self).__name__} got unexpected canned values: {', '.join(unknown)}")
        for name, kind in self.CANNED_FIELDS.items():
            setattr(self, name, canned.get(name, ZERO_VALUES[kind]))

        self._is_trace = False
        self._logger: Optional[SzLogger] = None
        self._logger_lock = threading.Lock()
        self._observer_origin = ""
        self._observers: Optional[SimpleSubject] = None
        self._observers_lock = threading.Lock()
        self._details_redactor: Optional[DetailsRedactor] = None

    # --- Observers ----------------------------------------------------------

    def get_observer_origin(self) -> str:
        """Return the origin tag carried by emitted events."""
        return self._observer_origin

    def set_observer_origin(self, origin: str) -> None:
        """Set the origin tag carried by future events."""
        self._observer_origin = origin

    def set_details_redactor(self, redactor: Optional[DetailsRedactor]) -> None:
        """Install a hook rewriting event details before delivery.

        Args:
            redactor: Callable receiving the operation name and the details
                mapping and returning the mapping to send, or ``None`` to send
                details verbatim.
        """
        self._details_redactor = redactor

    def has_observers(self) -> bool:
        """Return True when at least one observer is registered."""
        observers = self._observers
        return observers is not None and observers.has_observers()

    def register_observer(self, observer: Observer, *, ctx: Optional[Context] = None) -> None:
        """Add ``observer`` to the observers notified of every call.

        Args:
            observer: Observer to add; re-registering an id is a no-op.
            ctx: Optional cancellation context.
        """
        arguments = {"observer_id": observer.observer_id}
        with self._traced(REGISTER_OBSERVER, [observer.observer_id]):
            with self._observers_lock:
                if self._observers is None:
                    self._observers = SimpleSubject()
                self._observers.register_observer(observer)
            self._schedule_notification(REGISTER_OBSERVER, arguments, None, None, ctx)

    def unregister_observer(self, observer: Observer, *, ctx: Optional[Context] = None) -> None:
        """Remove ``observer``, after sending it the unregistration event.

        The event is dispatched before removal so the departing observer still
        receives it; delivery threads keep their own reference to the registry,
        so dropping it afterwards is safe.

        Args:
            observer: Observer to remove.
            ctx: Optional cancellation context.
        """
        arguments = {"observer_id": observer.observer_id}
        with self._traced(UNREGISTER_OBSERVER, [observer.observer_id]):
            with self._observers_lock:
                observers = self._observers
                if observers is None:
                    return
                if not is_cancelled(ctx):
                    notifier.notify(
                        observers,
                        self._observer_origin,
                        self.COMPONENT_ID,
                        UNREGISTER_OBSERVER.event_code,
                        None,
                        self._build_details(UNREGISTER_OBSERVER, arguments, None),
                    )
                observers.unregister_observer(observer)
                if not observers.has_observers():
                    self._observers = None

    # --- Logging ------------------------------------------------------------

    def set_log_level(self, log_level_name: str, *, ctx: Optional[Context] = None) -> None:
        """Set the log level; ``TRACE`` turns on entry/exit tracing.

        Args:
            log_level_name: TRACE, DEBUG, INFO, WARN, ERROR, FATAL or PANIC.
            ctx: Optional cancellation context.

        Raises:
            SzBadInputError: If the level name is unknown.
        """
        with self._traced(SET_LOG_LEVEL, [log_level_name]):
            if not SzLogger.is_valid_log_level_name(log_level_name):
                raise SzBadInputError(f"invalid log level: {log_level_name}", self.COMPONENT_ID)
            self._get_logger().set_log_level(log_level_name)
            self._is_trace = log_level_name == LEVEL_TRACE_NAME
            self._schedule_notification(SET_LOG_LEVEL, {"log_level_name": log_level_name}, None, None, ctx)

    def _get_logger(self) -> SzLogger:
        """Return the logger adapter, creating it on first use."""
        if self._logger is None:
            with self._logger_lock:
                if self._logger is None:
                    self._logger = helper.get_logger(self.COMPONENT_ID, self.ID_MESSAGES)
        return self._logger

    def _trace_entry(self, message_number: int, *details: Any) -> None:
        self._get_logger().log(message_number, *details)

    def _trace_exit(self, message_number: int, *details: Any) -> None:
        self._get_logger().log(message_number, *details)

    @contextmanager
    def _traced(self, operation: Operation, args: List[Any]) -> Iterator[_Outcome]:
        """Emit entry/exit traces around a block when tracing is on."""
        outcome = _Outcome()
        if not self._is_trace:
            yield outcome
            return

        entry_time = time.monotonic()
        self._trace_entry(operation.trace_entry, *args)
        try:
            yield outcome
        except Exception as exc:
            outcome.error = exc
            raise
        finally:
            elapsed = timedelta(seconds=time.monotonic() - entry_time)
            self._trace_exit(operation.trace_exit, *args, outcome.result, outcome.error, elapsed)

    # --- Envelope -----------------------------------------------------------

    def _run(self, operation: Operation, arguments: Dict[str, Any], ctx: Optional[Context], body: Callable[[], Any]):
        with self._traced(operation, list(arguments.values())) as outcome:
            outcome.result = body()
            self._schedule_notification(operation, arguments, outcome.result, outcome.error, ctx)
            return outcome.result

    def _run_iterator(
        self,
        operation: Operation,
        arguments: Dict[str, Any],
        ctx: Optional[Context],
        body: Callable[[], Iterator[StringFragment]],
    ) -> Iterator[StringFragment]:
        with self._traced(operation, list(arguments.values())) as outcome:
            self._schedule_notification(operation, arguments, None, None, ctx)
            for fragment in body():
                yield fragment
                if fragment.error is not None:
                    outcome.error = fragment.error
                    return

    def _schedule_notification(
        self,
        operation: Operation,
        arguments: Dict[str, Any],
        result: Any,
        error: Optional[BaseException],
        ctx: Optional[Context],
    ) -> None:
        """Notify observers on a background thread without waiting for it."""
        observers = self._observers
        if observers is None or is_cancelled(ctx):
            return
        thread = threading.Thread(
            target=self._notify,
            args=(observers, self._observer_origin, operation, arguments, result, error),
            name=f"sz-notify-{operation.name}",
            daemon=True,
        )
        thread.start()

    def _notify(
        self,
        observers: SimpleSubject,
        origin: str,
        operation: Operation,
        arguments: Dict[str, Any],
        result: Any,
        error: Optional[BaseException],
    ) -> None:
        try:
            event_details = self._build_details(operation, arguments, result)
            notifier.notify(observers, origin, self.COMPONENT_ID, operation.event_code, error, event_details)
        except Exception:  # noqa: BLE001
            log.warning("Could not notify observers of %s", operation.name, exc_info=True)

    def _build_details(self, operation: Operation, arguments: Dict[str, Any], result: Any) -> Dict[str, str]:
        """Stringify the operation's detail parameters, then apply the redactor."""
        event_details = {key: helper.stringify(arguments.get(param)) for key, param in operation.details}
        if operation.include_return:
            event_details["return"] = helper.stringify(result)
        if self._details_redactor is not None:
            event_details = dict(self._details_redactor(operation.name, event_details))
        return event_details
