"""Request data and canned Cloudinary responses for registration tests."""

from __future__ import annotations

AVATAR_URL = "http://res.cloudinary.com/demo/image/upload/avatar.png"
COVER_URL = "http://res.cloudinary.com/demo/image/upload/cover.png"

CLOUDINARY_UPLOAD_RESPONSE = {
    "asset_id": "3515c6000a548515f1134043f9785c2f",
    "public_id": "streamhub/avatar",
    "version": 1719304854,
    "resource_type": "image",
    "type": "upload",
    "format": "png",
    "bytes": 12,
    "url": AVATAR_URL,
    "secure_url": AVATAR_URL.replace("http://", "https://"),
}


def registration_data(**overrides) -> dict:
    """Form fields for the Jane Doe scenario; ``None`` drops a field."""
    data = {
        "fullName": "Jane Doe",
        "email": "jane@x.com",
        "username": "JaneD",
        "password": "secret",
    }
    data.update(overrides)
    return {k: v for k, v in data.items() if v is not None}


def image_files(avatar: bool = True, cover: bool = False) -> list:
    files = []
    if avatar:
        files.append(("avatar", ("avatar.png", b"\x89PNG avatar", "image/png")))
    if cover:
        files.append(("coverImage", ("cover.png", b"\x89PNG cover", "image/png")))
    return files
