"""Discovery Service Configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Discovery 서비스 설정."""

    # Service
    service_name: str = "discovery-api"
    service_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Business directory API
    business_api_url: str = "http://localhost:5000/api"
    business_api_timeout: float = 10.0
    search_result_limit: int = Field(50, ge=1, le=200)

    # Map defaults (Ciudad de México)
    default_center_latitude: float = 19.4326
    default_center_longitude: float = -99.1332
    default_zoom: int = 12

    # Geolocation
    near_me_timeout_seconds: float = Field(8.0, gt=0, lt=10)
    initial_location_timeout_seconds: float = Field(5.0, gt=0)
    ip_geolocation_enabled: bool = False
    ip_geolocation_url: str = "http://ip-api.com/json"

    # Directions
    directions_base_url: str = "https://www.google.com/maps/dir/"

    # Sessions
    session_max_count: int = Field(1000, ge=1)

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # OpenTelemetry
    otel_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://localhost:4317"

    model_config = SettingsConfigDict(
        env_prefix="DISCOVERY_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
