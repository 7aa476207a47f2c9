"""Async update check against the Python package index.

Queries the index's JSON API (``<index>/<package>/json``) for the latest
released version of crcf and compares it with the running version.  The
check is advisory: any network or parsing problem yields ``None`` and never
fails a scaffolding run.

Typical usage::

    checker = UpdateChecker()
    info = await checker.check()
    if info and info.update_available:
        print(f"Update available: {info.current} -> {info.latest}")
"""

from __future__ import annotations

import re

import httpx
from pydantic import BaseModel, Field

from crcf import __version__

PACKAGE_NAME = "crcf"


class UpdateInfo(BaseModel):
    """Result of an update check."""

    current: str = Field(..., description="Version that is running")
    latest: str = Field(..., description="Latest version on the package index")

    @property
    def update_available(self) -> bool:
        return parse_version(self.latest) > parse_version(self.current)


def parse_version(version: str) -> tuple[int, ...]:
    """Turn ``"1.10.2"`` into ``(1, 10, 2)`` for ordering.

    Only the leading dotted numeric release is used; pre-release and local
    suffixes are ignored (``"2.0.0rc1"`` -> ``(2, 0, 0)``).
    """
    match = re.match(r"\s*v?(\d+(?:\.\d+)*)", version)
    if not match:
        return ()
    return tuple(int(part) for part in match.group(1).split("."))


class UpdateChecker:
    """Looks up the latest released version of a package."""

    def __init__(
        self,
        index_url: str = "https://pypi.org/pypi",
        timeout: float = 3.0,
        package: str = PACKAGE_NAME,
        current_version: str = __version__,
    ) -> None:
        self.index_url = index_url.rstrip("/")
        self.timeout = timeout
        self.package = package
        self.current_version = current_version

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our timeout."""
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout, connect=self.timeout))

    async def latest_version(self) -> str | None:
        """Return the latest version string, or ``None`` if it is unknown."""
        url = f"{self.index_url}/{self.package}/json"
        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError):
            return None

        info = data.get("info") if isinstance(data, dict) else None
        version = info.get("version") if isinstance(info, dict) else None
        return version if isinstance(version, str) and version else None

    async def check(self) -> UpdateInfo | None:
        latest = await self.latest_version()
        if latest is None:
            return None
        return UpdateInfo(current=self.current_version, latest=latest)
