"""Unit tests for tracing helpers and exporter selection (no collector needed)."""

import pytest
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from crm.core.config import Settings
from crm.shared.telemetry.telemetry import TelemetryConfig, build_exporter
from crm.shared.telemetry.tracing import add_span_attributes, traced


class TestTraced:
    async def test_returns_wrapped_result(self) -> None:
        @traced("test.double")
        async def double(value: int, limit: int = 3) -> int:
            return value * 2

        assert await double(4, limit=1) == 8
        assert double.__name__ == "double"

    async def test_reraises_errors(self) -> None:
        @traced("test.boom")
        async def boom() -> None:
            raise LookupError("missing")

        with pytest.raises(LookupError, match="missing"):
            await boom()

    def test_add_span_attributes_without_active_span(self) -> None:
        add_span_attributes(**{"search.total_results": 3})


class TestBuildExporter:
    def test_none_disables_export(self) -> None:
        assert build_exporter("none", None) is None

    def test_console(self) -> None:
        assert isinstance(build_exporter("console", None), ConsoleSpanExporter)

    def test_unknown_kind_falls_back_to_console(self) -> None:
        assert isinstance(build_exporter("zipkin", None), ConsoleSpanExporter)

    def test_otlp_without_endpoint_falls_back_to_console(self) -> None:
        assert isinstance(build_exporter("otlp", None), ConsoleSpanExporter)

    def test_otlp_with_endpoint(self) -> None:
        exporter = build_exporter("otlp", "http://localhost:4317")
        assert isinstance(exporter, OTLPSpanExporter)


def test_config_from_settings_uses_app_identity() -> None:
    settings = Settings(app_name="crm-test", app_version="9.9.9")
    config = TelemetryConfig.from_settings(settings)
    assert config.service_name == "crm-test"
    assert config.service_version == "9.9.9"
    assert config.tracer_provider is None
    config.shutdown()
