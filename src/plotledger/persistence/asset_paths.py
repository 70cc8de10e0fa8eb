"""Naming conventions for record images, allotment PDFs and maps."""

from __future__ import annotations

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")


def image_prefix(record_id: str) -> str:
    return f"images/{record_id}/"


def pdf_key(record_id: str) -> str:
    return f"pdfs/{record_id}.pdf"


def map_key(record_id: str) -> str:
    return f"maps/{record_id}.pdf"


def is_image(filename: str) -> bool:
    return filename.lower().endswith(IMAGE_EXTENSIONS)


def image_url(public_base_url: str, record_id: str, filename: str) -> str:
    return f"{public_base_url.rstrip('/')}/uploads/images/{record_id}/{filename}"
