"""OpenTelemetry Distributed Tracing Configuration.

WASTE_OTEL_ENABLED=true 일 때만 활성화됩니다.

Architecture:
  Waste API (OTel SDK) -> OTLP/HTTP (4318) -> Collector
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from waste.setup.config import get_settings

logger = logging.getLogger(__name__)

_tracer_provider = None


def setup_tracing(service_name: str) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        bool: 설정 성공 여부
    """
    global _tracer_provider

    settings = get_settings()
    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (WASTE_OTEL_ENABLED=false)")
        return False

    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor
    from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": settings.service_version,
            "deployment.environment": settings.environment,
        }
    )
    _tracer_provider = TracerProvider(
        resource=resource,
        sampler=TraceIdRatioBased(settings.otel_sampling_rate),
    )
    _tracer_provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=f"{settings.otel_exporter_otlp_endpoint}/v1/traces"),
        )
    )
    trace.set_tracer_provider(_tracer_provider)

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": service_name,
            "endpoint": settings.otel_exporter_otlp_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측."""
    if not get_settings().otel_enabled:
        return

    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
    logger.info("FastAPI instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료."""
    global _tracer_provider

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
        logger.info("OpenTelemetry tracing shutdown complete")
