"""Avro Container Encoder – DIP adapter for SchemaEncoder.

Every payload is a complete Avro object container file holding one record,
so consumers can decode it with the embedded schema alone.
"""
from __future__ import annotations

import io
from typing import Any, Dict, List, Mapping

import fastavro
from fastavro.schema import SchemaParseException, UnknownType, to_parsing_canonical_form
from fastavro.validation import ValidationError

from domain.errors import EncodingError
from ports.schema_encoder import SchemaEncoder

CODECS = ("null", "deflate")


def _field_names(schema: Mapping[str, Any]) -> List[str]:
    return [f["name"] for f in schema.get("fields", [])]


class AvroContainerEncoder(SchemaEncoder):
    """SRP: encode a single record into a self-describing Avro container."""

    def __init__(self, schema: Mapping[str, Any], codec: str = "null") -> None:
        if codec not in CODECS:
            raise ValueError(f"Unsupported Avro codec {codec!r}; expected one of {CODECS}")
        self._parsed = fastavro.parse_schema(dict(schema))
        self._canonical = to_parsing_canonical_form(dict(schema))
        self._fields = _field_names(schema)
        self._codec = codec

    def _check_schema(self, value: Any) -> None:
        """A record carrying its own schema must carry this encoder's schema."""
        own = getattr(value, "schema", None)
        if own is None:
            return
        try:
            own = dict(own)
            canonical = to_parsing_canonical_form(own)
        except (SchemaParseException, UnknownType, ValueError, TypeError, KeyError) as exc:
            raise EncodingError(f"Record schema is not a valid Avro schema: {exc}") from exc
        if canonical != self._canonical:
            raise EncodingError(
                f"Record schema {own.get('name')!r} does not match container schema "
                f"{self._parsed['name']!r}"
            )

    def _to_datum(self, value: Any) -> Dict[str, Any]:
        try:
            if hasattr(value, "to_record"):
                self._check_schema(value)
                datum = dict(value.to_record())
            elif isinstance(value, Mapping):
                datum = dict(value)
            else:
                raise EncodingError(f"Cannot encode {type(value).__name__}: not a record")
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"Cannot build a record from {type(value).__name__}: {exc}") from exc

        missing = [f for f in self._fields if f not in datum]
        extra = sorted((k for k in datum if k not in self._fields), key=repr)
        if missing or extra:
            raise EncodingError(
                f"Record fields do not match schema {self._parsed['name']}: "
                f"missing={missing} extra={extra}"
            )
        return {f: datum[f] for f in self._fields}

    def encode(self, value: Any) -> bytes:
        datum = self._to_datum(value)
        try:
            with io.BytesIO() as out:
                # writer() flushes the block and sync marker before returning
                fastavro.writer(out, self._parsed, [datum], codec=self._codec, validator=True)
                return out.getvalue()
        except (ValidationError, OSError, ValueError, TypeError) as exc:
            raise EncodingError(f"Failed to write Avro container: {exc}") from exc


def decode_payload(data: bytes) -> List[Dict[str, Any]]:
    """Read every record of an Avro container payload."""
    try:
        with io.BytesIO(data) as buf:
            return list(fastavro.reader(buf))
    except (OSError, ValueError, TypeError, EOFError) as exc:
        raise EncodingError(f"Not a readable Avro container: {exc}") from exc


def decode_single(data: bytes) -> Dict[str, Any]:
    records = decode_payload(data)
    if len(records) != 1:
        raise EncodingError(f"Expected exactly one record, found {len(records)}")
    return records[0]


def payload_schema(data: bytes) -> Dict[str, Any]:
    """Writer schema embedded in the container header."""
    try:
        with io.BytesIO(data) as buf:
            return fastavro.reader(buf).writer_schema
    except (OSError, ValueError, TypeError, EOFError) as exc:
        raise EncodingError(f"Not a readable Avro container: {exc}") from exc
