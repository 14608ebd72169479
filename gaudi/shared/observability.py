# gaudi\shared\observability.py
from contextlib import contextmanager
from typing import Iterator

import structlog
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource

from gaudi import __version__
from gaudi.shared.config import settings

def setup_observability() -> TracerProvider:
    """
    Configures OpenTelemetry for the process.

    1. Sets the Global Tracer Provider.
    2. In DEBUG mode, prints finished spans to the console.
    """
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.version": __version__,
        "service.environment": settings.APP_ENV.value,
    })

    provider = TracerProvider(resource=resource)

    if settings.DEBUG:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider

def get_tracer(name: str) -> trace.Tracer:
    """Tracer tagged with the gaudi version; resolves against whatever provider is set later."""
    return trace.get_tracer(name, __version__)

_tracer = get_tracer("gaudi.use_cases")

@contextmanager
def use_case_span(use_case: str) -> Iterator[trace.Span]:
    """
    Scope of one use case execution:
    the 'use_case.<name>' span is current, and `use_case=<name>` is bound
    to the structlog context, so every event logged underneath (adapters
    included) carries both.
    """
    with structlog.contextvars.bound_contextvars(use_case=use_case):
        with _tracer.start_as_current_span(f"use_case.{use_case}") as span:
            span.set_attribute("gaudi.use_case", use_case)
            yield span
