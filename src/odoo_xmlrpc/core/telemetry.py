# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Telemetry infrastructure for the Odoo XML-RPC client.

Provides OpenTelemetry-based tracing, metrics, and logging around every
remote procedure call, with an extensible hook system for custom telemetry
providers.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generator,
    List,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

from opentelemetry import metrics, trace
from opentelemetry.trace import Status, StatusCode

from ..common.constants import (
    OTEL_ATTR_DB_OPERATION,
    OTEL_ATTR_DB_SYSTEM,
    OTEL_ATTR_HTTP_STATUS_CODE,
    OTEL_ATTR_ODOO_FAULT_CODE,
    OTEL_ATTR_ODOO_MODEL,
    OTEL_ATTR_RPC_METHOD,
    OTEL_ATTR_SERVER_URL,
)


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class TelemetryConfig:
    """Configuration for client telemetry and observability.

    Telemetry is opt-in. When enabled, the client produces OpenTelemetry
    traces and metrics plus standard :mod:`logging` records for every
    ``login`` and ``execute_kw`` round-trip.

    Example:
        Basic tracing::

            config = OdooConfig(
                telemetry=TelemetryConfig(enable_tracing=True)
            )

        Logging only::

            config = OdooConfig(
                telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG")
            )

        Custom hook::

            config = OdooConfig(
                telemetry=TelemetryConfig(hooks=[MyCustomTelemetryHook()])
            )
    """

    # Signal toggles
    enable_tracing: bool = False
    enable_metrics: bool = False
    enable_logging: bool = False

    # Logging configuration
    log_level: str = "WARNING"
    logger_name: str = "odoo_xmlrpc"

    # Custom hooks
    hooks: List["TelemetryHook"] = field(default_factory=list)


# ============================================================================
# Context Objects
# ============================================================================


@dataclass
class CallContext:
    """Context passed to telemetry hooks for each remote procedure call."""

    operation: str  # e.g. "records.create", "login"
    procedure: str  # "login" or "execute_kw"
    url: str
    model: Optional[str] = None

    start_time: float = field(default_factory=time.perf_counter)

    # Custom data bag for hooks to share state
    custom_data: Dict[str, Any] = field(default_factory=dict)

    # Internal: span reference for adding result attributes
    _span: Any = field(default=None, repr=False)


@dataclass
class ResultContext:
    """Result information passed to telemetry hooks."""

    status_code: int
    duration_ms: float
    fault_code: Any = None


# ============================================================================
# Hook Protocol
# ============================================================================


@runtime_checkable
class TelemetryHook(Protocol):
    """Protocol for custom telemetry hooks.

    All methods are optional - implement only what you need. Exceptions raised
    by hooks are logged and otherwise ignored.

    Example:
        class StatsdHook:
            def __init__(self, statsd):
                self.statsd = statsd

            def on_call_end(self, call: CallContext, result: ResultContext):
                self.statsd.timing(f"odoo.{call.operation}.duration", result.duration_ms)
    """

    def on_call_start(self, context: CallContext) -> None:
        """Called before each remote procedure call is sent."""
        ...

    def on_call_end(self, call: CallContext, result: ResultContext) -> None:
        """Called after each remote procedure call completes."""
        ...

    def on_call_error(self, call: CallContext, error: Exception) -> None:
        """Called when a remote procedure call raises."""
        ...


# ============================================================================
# Telemetry Manager
# ============================================================================


class TelemetryManager:
    """Manages telemetry instrumentation for the client.

    This class is internal and not part of the public API.
    """

    def __init__(self, config: Optional[TelemetryConfig] = None) -> None:
        self._config = config or TelemetryConfig()
        self._tracer: Optional[Any] = None
        self._meter: Optional[Any] = None
        self._logger: Optional[logging.Logger] = None
        self._hooks = list(self._config.hooks)

        # Metric instruments
        self._call_duration: Optional[Any] = None
        self._call_count: Optional[Any] = None
        self._error_count: Optional[Any] = None

        self._initialize()

    @property
    def is_tracing_enabled(self) -> bool:
        return self._tracer is not None

    @property
    def is_metrics_enabled(self) -> bool:
        return self._meter is not None

    def _initialize(self) -> None:
        if self._config.enable_tracing:
            self._tracer = trace.get_tracer("odoo_xmlrpc")

        if self._config.enable_metrics:
            self._meter = metrics.get_meter("odoo_xmlrpc")
            self._setup_metrics()

        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)
            self._logger.setLevel(getattr(logging, self._config.log_level.upper()))

    def _setup_metrics(self) -> None:
        """Create metric instruments."""
        self._call_duration = self._meter.create_histogram(
            name="odoo.client.call.duration",
            description="Duration of Odoo XML-RPC calls",
            unit="ms",
        )
        self._call_count = self._meter.create_counter(
            name="odoo.client.call.count",
            description="Number of Odoo XML-RPC calls",
            unit="1",
        )
        self._error_count = self._meter.create_counter(
            name="odoo.client.error.count",
            description="Number of failed Odoo XML-RPC calls",
            unit="1",
        )

    @contextmanager
    def trace_call(
        self,
        operation: str,
        procedure: str,
        url: str,
        model: Optional[str] = None,
    ) -> Generator[CallContext, None, None]:
        """Create a traced call context.

        Usage:
            with telemetry.trace_call("records.create", "execute_kw", url, "res.partner") as ctx:
                response = http._request(...)
                telemetry.record_result(ctx, status_code=response.status_code)
        """
        ctx = CallContext(operation=operation, procedure=procedure, url=url, model=model)

        self._dispatch("on_call_start", ctx)

        span = None
        if self._tracer:
            span_name = f"Odoo {operation}"
            if model:
                span_name = f"{span_name} {model}"
            span = self._tracer.start_span(
                span_name,
                kind=trace.SpanKind.CLIENT,
                attributes={
                    OTEL_ATTR_DB_SYSTEM: "odoo",
                    OTEL_ATTR_DB_OPERATION: operation,
                    OTEL_ATTR_RPC_METHOD: procedure,
                    OTEL_ATTR_SERVER_URL: url,
                    **({OTEL_ATTR_ODOO_MODEL: model} if model else {}),
                },
            )
            ctx._span = span

        try:
            yield ctx
        except Exception as e:
            if span:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
            if self._error_count:
                self._error_count.add(1, self._attributes(ctx))
            if self._logger:
                self._logger.warning("%s %s failed: %s", ctx.operation, ctx.procedure, e)
            self._dispatch("on_call_error", ctx, e)
            raise
        finally:
            if span:
                span.end()

    def record_result(self, ctx: CallContext, status_code: int, fault_code: Any = None) -> None:
        """Record call metrics and dispatch to hooks."""
        duration_ms = (time.perf_counter() - ctx.start_time) * 1000
        result = ResultContext(status_code=status_code, duration_ms=duration_ms, fault_code=fault_code)

        if ctx._span:
            ctx._span.set_attribute(OTEL_ATTR_HTTP_STATUS_CODE, status_code)
            if fault_code is not None:
                ctx._span.set_attribute(OTEL_ATTR_ODOO_FAULT_CODE, str(fault_code))

        if self._call_duration:
            attributes = self._attributes(ctx)
            attributes["status_code"] = status_code
            self._call_duration.record(duration_ms, attributes)
            self._call_count.add(1, attributes)

        if self._logger:
            self._logger.debug(
                "%s %s %s %.1fms",
                ctx.operation,
                ctx.procedure,
                status_code,
                duration_ms,
                extra={"odoo_model": ctx.model},
            )

        self._dispatch("on_call_end", ctx, result)

    def record_failure(self, ctx: CallContext, status_code: Optional[int] = None, fault_code: Any = None) -> None:
        """Annotate the span of a failed call.

        Error metrics, logging and ``on_call_error`` are emitted by
        :meth:`trace_call` when the exception leaves the context.
        """
        if ctx._span:
            if status_code is not None:
                ctx._span.set_attribute(OTEL_ATTR_HTTP_STATUS_CODE, status_code)
            if fault_code is not None:
                ctx._span.set_attribute(OTEL_ATTR_ODOO_FAULT_CODE, str(fault_code))

    @staticmethod
    def _attributes(ctx: CallContext) -> Dict[str, Any]:
        attributes: Dict[str, Any] = {"operation": ctx.operation, "procedure": ctx.procedure}
        if ctx.model:
            attributes["model"] = ctx.model
        return attributes

    def _dispatch(self, name: str, *args: Any) -> None:
        """Dispatch to all registered hooks."""
        for hook in self._hooks:
            callback = getattr(hook, name, None)
            if callback is None:
                continue
            try:
                callback(*args)
            except Exception:
                # Hooks should not break calls
                logging.getLogger(self._config.logger_name).exception("Telemetry hook %r failed in %s", hook, name)


# ============================================================================
# No-op Manager for when telemetry is disabled
# ============================================================================


class NoOpTelemetryManager:
    """No-op telemetry manager when telemetry is disabled."""

    @contextmanager
    def trace_call(
        self,
        operation: str,
        procedure: str,
        url: str,
        model: Optional[str] = None,
    ) -> Generator[CallContext, None, None]:
        yield CallContext(operation=operation, procedure=procedure, url=url, model=model)

    def record_result(self, *args: Any, **kwargs: Any) -> None:
        pass

    def record_failure(self, *args: Any, **kwargs: Any) -> None:
        pass


def create_telemetry_manager(
    config: Optional[TelemetryConfig],
) -> Union[TelemetryManager, NoOpTelemetryManager]:
    """Factory to create appropriate telemetry manager."""
    if config is None:
        return NoOpTelemetryManager()

    has_any_enabled = config.enable_tracing or config.enable_metrics or config.enable_logging or config.hooks

    if not has_any_enabled:
        return NoOpTelemetryManager()

    return TelemetryManager(config)


__all__ = [
    "TelemetryConfig",
    "TelemetryHook",
    "TelemetryManager",
    "NoOpTelemetryManager",
    "CallContext",
    "ResultContext",
    "create_telemetry_manager",
]
