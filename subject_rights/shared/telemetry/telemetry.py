"""OpenTelemetry setup: one tracer provider per running service.

Spans go to the console in development or to an OTLP collector. FastAPI
requests are instrumented, and so is the Redis client when sessions live
in Redis.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

# Probes are not traced
UNTRACED_URLS = "/api/v1/health"


def span_exporter(kind: str, otlp_endpoint: str | None = None) -> SpanExporter:
    """Return the exporter named by TELEMETRY_EXPORTER."""
    if kind == "console":
        return ConsoleSpanExporter()
    if kind == "otlp":
        if not otlp_endpoint:
            raise ValueError("TELEMETRY_OTLP_ENDPOINT is required for the otlp exporter")
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    raise ValueError(f"Unknown telemetry exporter: {kind!r}")


class Telemetry:
    """Tracer provider of the service and the instrumentation installed on it."""

    def __init__(self, provider: TracerProvider) -> None:
        self.provider = provider
        self._redis_instrumented = False

    @classmethod
    def start(
        cls,
        *,
        service_name: str,
        service_version: str,
        environment: str,
        exporter: SpanExporter,
        sample_rate: float = 1.0,
    ) -> "Telemetry":
        """Create the provider, register it globally and return the handle."""
        resource = Resource.create(
            {
                SERVICE_NAME: service_name,
                SERVICE_VERSION: service_version,
                "deployment.environment": environment,
            }
        )
        provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sample_rate))
        provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        logger.info(
            "Tracing %s %s with %s (sample rate %s)",
            service_name,
            service_version,
            type(exporter).__name__,
            sample_rate,
        )
        return cls(provider)

    def instrument(self, app: FastAPI, *, redis: bool = False) -> None:
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=self.provider, excluded_urls=UNTRACED_URLS
        )
        if redis:
            RedisInstrumentor().instrument(tracer_provider=self.provider)
            self._redis_instrumented = True

    def shutdown(self) -> None:
        """Remove Redis instrumentation and flush pending spans."""
        if self._redis_instrumented:
            RedisInstrumentor().uninstrument()
            self._redis_instrumented = False
        self.provider.shutdown()
