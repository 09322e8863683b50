"""
Tracing configuration for Gen-Form.

Agent runs are traced with the Agents SDK. By default traces go to the
OpenAI dashboard; the processors below send them to the application log
or to a JSON Lines file instead.
"""

import json
import logging

from agents import set_tracing_disabled
from agents.tracing import (
    Span,
    Trace,
    TracingProcessor,
    set_trace_processors,
)

logger = logging.getLogger("gen-form")


class LoggingTracingProcessor(TracingProcessor):
    """Writes trace and span boundaries to the gen-form logger."""

    def __init__(self, verbose: bool = False):
        """
        Args:
            verbose: If True, also log every span start and end.
        """
        self.verbose = verbose

    def on_trace_start(self, trace: Trace) -> None:
        logger.info(f"[trace start] {trace.name} ({trace.trace_id})")

    def on_trace_end(self, trace: Trace) -> None:
        logger.info(f"[trace end] {trace.name} ({trace.trace_id})")

    def on_span_start(self, span: Span[object]) -> None:
        if self.verbose:
            logger.debug(f"[span start] {span.span_id} {span.span_data}")

    def on_span_end(self, span: Span[object]) -> None:
        if self.verbose:
            logger.debug(f"[span end] {span.span_id} {span.span_data}")

    def shutdown(self) -> None:
        pass

    def force_flush(self) -> None:
        pass


class FileTracingProcessor(TracingProcessor):
    """
    Appends one JSON line per finished trace, with its spans.

    Spans are buffered per trace id, so concurrent generations do not
    interleave.
    """

    def __init__(self, file_path: str = "traces.jsonl"):
        self.file_path = file_path
        self._spans: dict[str, list[dict]] = {}

    def on_trace_start(self, trace: Trace) -> None:
        self._spans[trace.trace_id] = []

    def on_trace_end(self, trace: Trace) -> None:
        record = {
            "trace_id": trace.trace_id,
            "name": trace.name,
            "spans": self._spans.pop(trace.trace_id, []),
        }
        with open(self.file_path, "a") as f:
            f.write(json.dumps(record) + "\n")

    def on_span_start(self, span: Span[object]) -> None:
        pass

    def on_span_end(self, span: Span[object]) -> None:
        spans = self._spans.get(span.trace_id)
        if spans is not None:
            spans.append({"span_id": span.span_id, "data": str(span.span_data)})

    def shutdown(self) -> None:
        self._spans.clear()

    def force_flush(self) -> None:
        pass


def setup_tracing(
    enabled: bool = True,
    to_log: bool = False,
    verbose: bool = False,
    file_path: str | None = None,
) -> None:
    """
    Configure tracing for Gen-Form.

    Args:
        enabled: Whether tracing is enabled.
        to_log: Whether to write traces to the gen-form logger.
        verbose: Whether to log span boundaries as well.
        file_path: Optional JSON Lines file to append traces to.

    Example:
        >>> from gen_form.tracing import setup_tracing
        >>> setup_tracing(to_log=True, verbose=True)
    """
    if not enabled:
        set_tracing_disabled(True)
        return

    set_tracing_disabled(False)

    processors: list[TracingProcessor] = []
    if to_log:
        processors.append(LoggingTracingProcessor(verbose=verbose))
    if file_path:
        processors.append(FileTracingProcessor(file_path=file_path))

    if processors:
        set_trace_processors(processors)


def disable_tracing() -> None:
    """Disable all tracing."""
    set_tracing_disabled(True)


def enable_tracing() -> None:
    """Enable tracing (uses default OpenAI dashboard)."""
    set_tracing_disabled(False)
