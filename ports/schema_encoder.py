"""DIP Port – SchemaEncoder.

Decouple the pipeline from Avro specifics. Encode one record to bytes.
"""
from typing import Any


class SchemaEncoder:
    """ISP: just enough to turn a record into an opaque payload."""

    def encode(self, value: Any) -> bytes:  # pragma: no cover - interface only
        raise NotImplementedError
