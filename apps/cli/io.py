"""CLI I/O helpers for template retrieval and display."""

from __future__ import annotations

import json
from pathlib import Path
from urllib.parse import urlsplit

import httpx

from core.support.template import ReasonTemplate
from core.utils.errors import TemplateSourceError

_URL_SCHEMES = {"http", "https"}
_FETCH_TIMEOUT_SECONDS = 10.0


def read_template_source(
    location: str,
    *,
    transport: httpx.BaseTransport | None = None,
) -> bytes:
    """Return raw template bytes from a local file or an http(s) URL."""

    path = Path(location)
    try:
        is_file = path.is_file()
        is_dir = not is_file and path.is_dir()
    except OSError as exc:
        raise TemplateSourceError(
            f"cannot read the file {location!r}: {exc}", location=location
        ) from exc

    if is_file:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise TemplateSourceError(
                f"cannot read the file {location!r}: {exc}", location=location
            ) from exc
    if is_dir:
        raise TemplateSourceError(
            f"the provided path {location!r} is a directory, not a file", location=location
        )

    parts = urlsplit(location)
    if parts.scheme in _URL_SCHEMES and parts.netloc:
        return _fetch_url(location, transport=transport)

    raise TemplateSourceError(f"cannot read the file {location!r}", location=location)


def render_reason(template: ReasonTemplate) -> str:
    """Pretty-print the reason exactly as it will be sent."""

    return json.dumps(template.to_payload(), ensure_ascii=False, indent=2)


def _fetch_url(url: str, *, transport: httpx.BaseTransport | None) -> bytes:
    try:
        with httpx.Client(
            timeout=_FETCH_TIMEOUT_SECONDS, transport=transport, follow_redirects=True
        ) as client:
            response = client.get(url)
    except httpx.HTTPError as exc:
        raise TemplateSourceError(f"host {url!r} is not accessible: {exc}", location=url) from exc

    if response.is_error:
        raise TemplateSourceError(
            f"fetching {url!r} returned HTTP {response.status_code}", location=url
        )
    return response.content
