from __future__ import annotations
import json
import logging
import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode
from wordcount import count
from wordcount.obs.decorators import timed, traced
from wordcount.obs.logging_setup import StructuredFormatter, get_logger, setup_logging
from wordcount.obs.metrics import MetricsRegistry, metrics_registry

@pytest.fixture(scope="module")
def span_exporter():
    """In-memory exporter attached to the global tracer provider."""
    provider = trace.get_tracer_provider()
    if not isinstance(provider, TracerProvider):
        provider = TracerProvider()
        trace.set_tracer_provider(provider)
    exporter = InMemorySpanExporter()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return exporter

def test_count_emits_span(span_exporter):
    span_exporter.clear()
    count("one two", "words")
    spans = [s for s in span_exporter.get_finished_spans() if s.name == "wordcount.count"]
    assert len(spans) == 1
    assert spans[0].attributes["function.name"] == "count"
    assert spans[0].status.status_code is StatusCode.OK

def test_traced_records_failures(span_exporter):
    """Failures are put on the span and re-raised."""
    @traced(operation_name="test.failing")
    def failing():
        raise ValueError("boom")

    span_exporter.clear()
    with pytest.raises(ValueError):
        failing()
    span = [s for s in span_exporter.get_finished_spans() if s.name == "test.failing"][0]
    assert span.status.status_code is StatusCode.ERROR
    assert span.events[0].name == "exception"

def test_count_increments_counter():
    labels = {"type": "characters_excluding_spaces"}
    before = metrics_registry.get_counter("wordcount_counts_total", labels)
    count("abc", "characters_excluding_spaces")
    assert metrics_registry.get_counter("wordcount_counts_total", labels) == before + 1

def test_timed_records_histogram():
    @timed("test_timed_duration_ms")
    def work():
        return 5

    assert work() == 5
    assert metrics_registry.get_metrics()["histograms"]["test_timed_duration_ms"]["count"] >= 1

def test_metrics_registry_summaries():
    registry = MetricsRegistry()
    registry.increment_counter("hits", {"type": "words"})
    registry.increment_counter("hits", {"type": "words"}, 2)
    for value in (1.0, 2.0, 3.0, 4.0):
        registry.record_histogram("latency", value)
    registry.set_gauge("depth", 7, {"queue": "a"})

    metrics = registry.get_metrics()
    assert metrics["counters"]["hits"] == {"hits{type=words}": 3.0}
    assert metrics["histograms"]["latency"]["count"] == 4
    assert metrics["histograms"]["latency"]["mean"] == 2.5
    assert metrics["histograms"]["latency"]["max"] == 4.0
    assert metrics["gauges"] == {"depth{queue=a}": 7}

    registry.reset()
    assert registry.get_metrics()["counters"] == {}

def test_disabled_registry_records_nothing():
    registry = MetricsRegistry(enabled=False)
    registry.increment_counter("hits")
    registry.record_histogram("latency", 1.0)
    assert registry.get_counter("hits") == 0.0
    assert registry.get_metrics()["histograms"] == {}

def test_structured_formatter_includes_extra():
    record = logging.LogRecord("wordcount.test", logging.WARNING, __file__, 10, "Dropping %s", ("x",), None)
    record.fields = ["html_regexp"]
    entry = json.loads(StructuredFormatter().format(record))
    assert entry["message"] == "Dropping x"
    assert entry["level"] == "WARNING"
    assert entry["extra"] == {"fields": ["html_regexp"]}
    assert "trace_id" not in entry

def test_structured_formatter_adds_trace_ids(span_exporter):
    record = logging.LogRecord("wordcount.test", logging.INFO, __file__, 10, "inside", (), None)
    with trace.get_tracer(__name__).start_as_current_span("test.logging"):
        entry = json.loads(StructuredFormatter().format(record))
    assert len(entry["trace_id"]) == 32
    assert len(entry["span_id"]) == 16

def test_context_logger_passes_kwargs_as_extra(caplog):
    logger = get_logger("wordcount.test")
    with caplog.at_level(logging.DEBUG, logger="wordcount.test"):
        logger.warning("Something happened", strategy="words", result=3)
    record = caplog.records[-1]
    assert record.strategy == "words"
    assert record.result == 3

def test_setup_logging_installs_formatter():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        setup_logging(logging.DEBUG, structured=True)
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        setup_logging(logging.WARNING, structured=False)
        assert not isinstance(root.handlers[0].formatter, StructuredFormatter)
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
