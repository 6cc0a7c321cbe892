"""
Artifact reference helpers.

Turns artifact references (data URLs, http(s) URLs, local paths) into bytes,
and builds data URLs from raw bytes.

Dependencies: httpx, base64, mimetypes
System role: Artifact materialization for downloads and uploads
"""

import asyncio
import base64
import mimetypes
from pathlib import Path
from urllib.parse import unquote_to_bytes

import httpx

DEFAULT_MIME_TYPE = "application/octet-stream"


def to_data_url(data: bytes, mime_type: str) -> str:
    """Encode bytes as a base64 data URL."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def decode_data_url(url: str) -> tuple[bytes, str]:
    """
    Decode a data URL.

    Args:
        url: data:[<mime>][;base64],<payload>

    Returns:
        tuple[bytes, str]: (payload bytes, mime type)

    Raises:
        ValueError: If the URL is not a well-formed data URL
    """
    if not url.startswith("data:") or "," not in url:
        raise ValueError("Malformed data URL")
    header, payload = url[len("data:"):].split(",", 1)
    parts = header.split(";")
    mime_type = parts[0] or "text/plain"
    if "base64" in parts[1:]:
        try:
            return base64.b64decode(payload, validate=True), mime_type
        except ValueError as e:
            raise ValueError(f"Malformed base64 payload in data URL: {e}") from e
    return unquote_to_bytes(payload), mime_type


async def load_artifact_bytes(
    artifact_ref: str,
    http_client: httpx.AsyncClient | None = None,
) -> tuple[bytes, str]:
    """
    Materialize an artifact reference into bytes.

    Args:
        artifact_ref: Data URL, http(s) URL or local file path
        http_client: Optional shared client for remote references

    Returns:
        tuple[bytes, str]: (content, mime type)

    Raises:
        ValueError: Malformed data URL
        httpx.HTTPError: Remote fetch failed
        OSError: Local file missing or unreadable
    """
    if artifact_ref.startswith("data:"):
        return decode_data_url(artifact_ref)

    if artifact_ref.startswith(("http://", "https://")):
        if http_client is None:
            async with httpx.AsyncClient(timeout=30.0, follow_redirects=True) as client:
                response = await client.get(artifact_ref)
        else:
            response = await http_client.get(artifact_ref)
        response.raise_for_status()
        mime_type = response.headers.get("content-type", DEFAULT_MIME_TYPE).split(";")[0]
        return response.content, mime_type

    path = Path(artifact_ref)
    data = await asyncio.to_thread(path.read_bytes)
    return data, mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE


def extension_for(mime_type: str) -> str:
    """File extension (with dot) for a MIME type, '.bin' when unknown."""
    if mime_type == "image/svg+xml":
        return ".svg"
    return mimetypes.guess_extension(mime_type) or ".bin"
