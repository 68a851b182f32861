"""Waste API Configuration.

외부화 원칙:
- 모델 경로, 업로드 제한, 검색 반경 → env
- CORS origins → env (콤마 구분, 기본값 전체 허용)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MIB = 1024 * 1024


class Settings(BaseSettings):
    """Waste API 설정."""

    # === Service Identity ===
    service_name: str = Field("waste-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("dev", description="Environment (dev, staging, prod)")
    log_level: str = Field("INFO", description="Root log level")

    # === Server ===
    host: str = Field("0.0.0.0", description="Bind host")
    port: int = Field(5001, ge=1, le=65535, description="Bind port")

    # === Model ===
    model_path: str = Field(
        "model/waste_model.keras",
        description="Keras model file. 로드 실패 시 /classify는 503.",
    )
    image_size: int = Field(300, ge=1, description="Model input edge length (pixels)")

    # === Request Limits ===
    max_upload_bytes: int = Field(5 * MIB, ge=1, description="Max image upload size")

    # === Recycling Centers ===
    search_radius_km: float = Field(10.0, gt=0, description="Nearby search radius (km)")

    # === CORS (env 외부화) ===
    cors_origins_str: str = Field(
        "*",
        validation_alias=AliasChoices("WASTE_CORS_ORIGINS", "WASTE_CORS_ORIGINS_STR"),
        description="Allowed CORS origins (콤마 구분)",
    )

    @property
    def cors_origins(self) -> list[str]:
        """CORS origins 파싱."""
        return [o.strip() for o in self.cors_origins_str.split(",") if o.strip()]

    # === OpenTelemetry ===
    otel_enabled: bool = Field(False, description="Enable OpenTelemetry tracing")
    otel_exporter_otlp_endpoint: str = Field(
        "http://localhost:4318",
        description="OTLP/HTTP exporter endpoint",
    )
    otel_sampling_rate: float = Field(1.0, ge=0.0, le=1.0, description="Trace sampling ratio")

    model_config = SettingsConfigDict(
        env_prefix="WASTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=("settings_",),
    )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
