"""S3 asset backend implementing IAssetResolver."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from plotledger.core.exceptions import AssetStoreError
from plotledger.models.plot_record import RecordAssets
from plotledger.persistence.asset_paths import (
    image_prefix,
    image_url,
    is_image,
    map_key,
    pdf_key,
)


class S3AssetResolver:
    """Production IAssetResolver reading the uploads layout from an S3 bucket."""

    def __init__(self, bucket: str, public_base_url: str, region: str = "ap-south-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        self._public_base_url = public_base_url
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def _exists(self, key: str) -> bool:
        try:
            self._client.head_object(Bucket=self._bucket, Key=key)
            return True
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in ("404", "NoSuchKey", "NotFound"):
                return False
            raise AssetStoreError(f"S3 head failed for {key!r}: {exc}") from exc

    def _list_images(self, record_id: str) -> list[str]:
        prefix = image_prefix(record_id)
        try:
            names: list[str] = []
            paginator = self._client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
                for obj in page.get("Contents", []):
                    name = obj["Key"][len(prefix):]
                    if name and "/" not in name and is_image(name):
                        names.append(name)
            return sorted(names)
        except ClientError as exc:
            raise AssetStoreError(f"S3 list failed for prefix={prefix!r}: {exc}") from exc

    def resolve(self, record_id: str) -> RecordAssets:
        record_id = str(record_id)
        return RecordAssets(
            images=[image_url(self._public_base_url, record_id, n) for n in self._list_images(record_id)],
            has_pdf=self._exists(pdf_key(record_id)),
            has_map=self._exists(map_key(record_id)),
        )
