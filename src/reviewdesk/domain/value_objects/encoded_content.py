"""Self-describing encoded file payload."""

import base64
import binascii
from dataclasses import dataclass

_PREFIX = "data:"
_MARKER = ";base64,"


@dataclass(frozen=True)
class EncodedContent:
    """File payload stored as a base64 data URL (data:<mime>;base64,<payload>)."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.startswith(_PREFIX) or _MARKER not in self.value:
            raise ValueError("Encoded content must be a base64 data URL")

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> "EncodedContent":
        payload = base64.b64encode(data).decode("ascii")
        return cls(value=f"{_PREFIX}{mime_type or 'application/octet-stream'}{_MARKER}{payload}")

    @property
    def mime_type(self) -> str:
        return self.value[len(_PREFIX) : self.value.index(_MARKER)]

    def decode(self) -> bytes:
        """Return the raw payload bytes."""
        payload = self.value[self.value.index(_MARKER) + len(_MARKER) :]
        try:
            return base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Corrupt encoded content: {e}") from e
