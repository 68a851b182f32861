"""Observability / Logging 테스트."""

import logging
from unittest.mock import MagicMock, patch

from waste.infrastructure.observability import instrument_fastapi, setup_tracing, shutdown_tracing
from waste.setup.logging import setup_logging


class TestTracing:
    """OTel 비활성화 경로 테스트."""

    def test_setup_tracing_disabled(self):
        settings = MagicMock(otel_enabled=False)
        with patch("waste.infrastructure.observability.tracing.get_settings", return_value=settings):
            assert setup_tracing("waste-api") is False

    def test_instrument_fastapi_disabled(self):
        settings = MagicMock(otel_enabled=False)
        app = MagicMock()
        with patch("waste.infrastructure.observability.tracing.get_settings", return_value=settings):
            instrument_fastapi(app)
        app.add_middleware.assert_not_called()

    def test_shutdown_without_setup(self):
        """설정 전 shutdown은 no-op."""
        shutdown_tracing()


class TestLogging:
    """setup_logging 테스트."""

    def test_noisy_loggers_quieted(self):
        setup_logging("DEBUG")

        assert logging.getLogger("PIL").level == logging.WARNING
        assert logging.getLogger("absl").level == logging.WARNING
