"""Domain models."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class MetadataRecord:
    """Resolved display information for an outbound link (value object).

    Only `url` is guaranteed; it echoes the requested URL exactly. Every other
    field is best-effort and may be None.
    """

    url: str
    title: str | None = None
    description: str | None = None
    image: str | None = None
    site_name: str | None = None
    favicon: str | None = None
    type: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.url, str):
            raise TypeError("metadata.url must be a str")

    def to_dict(self) -> dict[str, Any]:
        """Serialisable dict; absent fields are omitted, url is always present."""
        payload: dict[str, Any] = {"url": self.url}
        for key, value in asdict(self).items():
            if key != "url" and value is not None:
                payload[key] = value
        return payload
