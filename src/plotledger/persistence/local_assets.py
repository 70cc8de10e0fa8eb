"""Uploads-directory asset backend implementing IAssetResolver."""

from __future__ import annotations

from pathlib import Path

from plotledger.core.exceptions import AssetStoreError
from plotledger.models.plot_record import RecordAssets
from plotledger.persistence.asset_paths import (
    image_prefix,
    image_url,
    is_image,
    map_key,
    pdf_key,
)


class LocalAssetResolver:
    """IAssetResolver over a local (or network-mounted) uploads directory."""

    def __init__(self, uploads_path: str | Path, public_base_url: str) -> None:
        self._root = Path(uploads_path)
        self._public_base_url = public_base_url

    def resolve(self, record_id: str) -> RecordAssets:
        record_id = str(record_id)
        image_dir = self._root / image_prefix(record_id)
        try:
            names = sorted(p.name for p in image_dir.iterdir() if p.is_file() and is_image(p.name)) \
                if image_dir.is_dir() else []
        except OSError as exc:
            raise AssetStoreError(f"Cannot list images in {image_dir}: {exc}") from exc
        return RecordAssets(
            images=[image_url(self._public_base_url, record_id, n) for n in names],
            has_pdf=(self._root / pdf_key(record_id)).is_file(),
            has_map=(self._root / map_key(record_id)).is_file(),
        )
