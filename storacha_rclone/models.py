from __future__ import annotations
"""Data models for credentials, listings and downloads."""
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

# JSON key for each CredentialRecord attribute; these names are the on-disk format.
WIRE_FIELDS = {
    "access_key_id": "accessKeyId",
    "secret_access_key": "secretAccessKey",
    "region": "region",
    "bucket": "bucket",
}


@dataclass(frozen=True)
class CredentialRecord:
    """Static credentials plus the default region and bucket."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    region: str
    bucket: str

    def missing_fields(self) -> list[str]:
        return [
            wire_name
            for attr, wire_name in WIRE_FIELDS.items()
            if not isinstance(getattr(self, attr), str) or not getattr(self, attr)
        ]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_dict(self) -> dict[str, str]:
        return {wire_name: getattr(self, attr) for attr, wire_name in WIRE_FIELDS.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "CredentialRecord":
        values = {}
        for attr, wire_name in WIRE_FIELDS.items():
            value = data.get(wire_name, "")
            values[attr] = value if isinstance(value, str) else ""
        return cls(**values)


class ObjectEntry(NamedTuple):
    """A single listed object."""

    key: str
    size: int


@dataclass
class ListingPage:
    """One response of a paginated listing."""

    entries: list[ObjectEntry] = field(default_factory=list)
    next_token: Optional[str] = None
    truncated: bool = False


@dataclass
class DownloadResult:
    bytes_written: int
    destination_path: str
