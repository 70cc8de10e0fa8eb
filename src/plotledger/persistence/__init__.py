"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

import logging
from typing import NamedTuple

from plotledger.core.config import AppSettings
from plotledger.core.protocols import IAssetResolver, ICacheBackend, IRecordStore, IUserStore
from plotledger.persistence.dynamodb_backend import DynamoDBRecordStore, DynamoDBUserStore
from plotledger.persistence.local_assets import LocalAssetResolver
from plotledger.persistence.memory_backend import (
    MemoryAssetResolver,
    MemoryCacheBackend,
    MemoryRecordStore,
    MemoryUserStore,
)
from plotledger.persistence.redis_backend import RedisCacheBackend
from plotledger.persistence.s3_backend import S3AssetResolver

logger = logging.getLogger(__name__)


class Backends(NamedTuple):
    records: IRecordStore
    assets: IAssetResolver
    users: IUserStore
    tokens: ICacheBackend


def create_assets(settings: AppSettings) -> IAssetResolver:
    if settings.asset_backend == "s3":
        return S3AssetResolver(
            bucket=settings.s3.bucket,
            public_base_url=settings.assets.public_base_url,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
        )
    if settings.asset_backend == "local":
        return LocalAssetResolver(settings.assets.uploads_path, settings.assets.public_base_url)
    return MemoryAssetResolver()


def create_persistence(settings: AppSettings | None = None) -> Backends:
    """Create wired-up persistence backends from application settings.

    ``settings.backend`` picks the record/user stores once for the process:
    ``memory`` serves the bundled demo data, ``dynamodb`` the live tables
    (with Redis holding password-reset tokens).
    """
    if settings is None:
        settings = AppSettings()

    assets = create_assets(settings)
    logger.info("Using %s record store, %s assets", settings.backend, settings.asset_backend)

    if settings.backend == "memory":
        return Backends(
            records=MemoryRecordStore.with_demo_data(),
            assets=assets,
            users=MemoryUserStore.with_demo_data(),
            tokens=MemoryCacheBackend(),
        )

    records = DynamoDBRecordStore(
        table_name=settings.dynamodb.plots_table,
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
    )
    users = DynamoDBUserStore(
        table_name=settings.dynamodb.users_table,
        table_suffix=settings.dynamodb.table_suffix,
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
    )
    tokens = RedisCacheBackend(
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
    )
    return Backends(records=records, assets=assets, users=users, tokens=tokens)
