"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration for the live record store."""

    model_config = {"env_prefix": "PLOTLEDGER_DYNAMO_"}

    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "ap-south-1"
    endpoint_url: str | None = None  # LocalStack override
    plots_table: str = "plotledger-plots"
    users_table: str = "plotledger-users"


class S3Config(BaseSettings):
    """S3 bucket holding plot images, documents and maps."""

    model_config = {"env_prefix": "PLOTLEDGER_S3_"}

    bucket: str = "plotledger-uploads"
    region: str = "ap-south-1"
    endpoint_url: str | None = None  # LocalStack override


class AssetConfig(BaseSettings):
    """Uploads directory layout and the public URL assets are served from."""

    model_config = {"env_prefix": "PLOTLEDGER_ASSETS_"}

    uploads_path: str = "uploads"
    public_base_url: str = "http://localhost:8083"


class RedisConfig(BaseSettings):
    """Redis configuration for password-reset tokens."""

    model_config = {"env_prefix": "PLOTLEDGER_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class AuthConfig(BaseSettings):
    """Credential and password-reset settings."""

    model_config = {"env_prefix": "PLOTLEDGER_AUTH_"}

    reset_token_ttl: int = 3600  # 1 hour
    frontend_url: str = "http://localhost:5173"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PLOTLEDGER_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    # "memory" serves the bundled demo records; "dynamodb" is the live store.
    backend: Literal["memory", "dynamodb"] = "memory"
    asset_backend: Literal["local", "s3", "memory"] = "local"

    dynamodb: DynamoDBConfig = DynamoDBConfig()
    s3: S3Config = S3Config()
    assets: AssetConfig = AssetConfig()
    redis: RedisConfig = RedisConfig()
    auth: AuthConfig = AuthConfig()
