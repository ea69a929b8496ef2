"""Picture stored inline as a data URI."""

import base64
import binascii
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class InlinePicture:
    """Decoded content of a ``data:<type>;base64,<payload>`` URI."""

    content_type: str
    content: bytes

    @classmethod
    def from_data_uri(cls, value: Optional[str]) -> Optional["InlinePicture"]:
        """
        Decode a data URI.

        Args:
            value: Data URI, possibly None or empty

        Returns:
            The picture, or None when the value is not a base64 data URI
        """
        if not value or not value.startswith("data:"):
            return None

        header, _, payload = value[len("data:"):].partition(",")
        if not header.endswith(";base64"):
            return None

        content_type = header[: -len(";base64")] or "application/octet-stream"
        try:
            content = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            return None

        return cls(content_type=content_type, content=content)
