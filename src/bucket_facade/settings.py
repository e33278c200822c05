"""Facade settings via Pydantic Settings."""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class BucketSettings(BaseSettings):
    """Binding names and environment tag used to pick the physical bucket."""

    model_config = SettingsConfigDict(env_prefix="BUCKET_")

    environment: str = "development"
    production_marker: str = "production"
    production_binding: str = "PROD_CR_BUCKET"
    development_binding: str = "CR_BUCKET"
    default_binding: str = "BUCKET"


class MinIOSettings(BaseSettings):
    """MinIO connection settings for the S3-compatible binding."""

    model_config = SettingsConfigDict(env_prefix="MINIO_")

    endpoint: str = "localhost:9000"
    access_key: str = "minioadmin"
    secret_key: str = "minioadmin"
    secure: bool = False
    bucket: str = "bucket-facade"
    part_size: int = 10 * 1024 * 1024  # multipart chunk for streams of unknown length


class LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Apply logging settings to the root logger."""
    settings = settings or LoggingSettings()
    logging.basicConfig(level=settings.level.upper(), format=settings.format, force=True)
