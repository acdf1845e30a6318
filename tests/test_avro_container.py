import fastavro
import io

import pytest

from adapters.avro.container import (
    AvroContainerEncoder,
    decode_payload,
    decode_single,
    payload_schema,
)
from domain.employee import EMPLOYEE_SCHEMA, Employee
from domain.errors import EncodingError


@pytest.fixture
def encoder():
    return AvroContainerEncoder(EMPLOYEE_SCHEMA)


def test_round_trip_employee(encoder):
    payload = encoder.encode(Employee(name="Alice", id=42))
    assert decode_single(payload) == {"name": "Alice", "id": 42}


def test_boundary_values(encoder):
    payload = encoder.encode({"name": "", "id": 0})
    assert decode_single(payload) == {"name": "", "id": 0}


def test_payload_is_single_record_container(encoder):
    payload = encoder.encode(Employee(name="Bob", id=7))
    assert payload
    assert payload[:4] == b"Obj\x01"
    records = list(fastavro.reader(io.BytesIO(payload)))
    assert len(records) == 1


def test_payload_embeds_schema(encoder):
    schema = payload_schema(encoder.encode(Employee(name="Bob", id=7)))
    assert schema["name"].endswith("Employee")
    assert [f["name"] for f in schema["fields"]] == ["name", "id"]


def test_encoding_twice_decodes_equal(encoder):
    emp = Employee(name="Carol", id=2**40)
    first, second = encoder.encode(emp), encoder.encode(emp)
    assert decode_payload(first) == decode_payload(second)


def test_deflate_codec_round_trip():
    encoder = AvroContainerEncoder(EMPLOYEE_SCHEMA, codec="deflate")
    assert decode_single(encoder.encode(Employee(name="Dan", id=3))) == {"name": "Dan", "id": 3}


def test_unknown_codec_rejected():
    with pytest.raises(ValueError):
        AvroContainerEncoder(EMPLOYEE_SCHEMA, codec="lzma")


@pytest.mark.parametrize(
    "record",
    [
        {"name": "Eve"},
        {"id": 1},
        {"name": "Eve", "id": 1, "email": "eve@example.com"},
        {},
    ],
)
def test_field_set_mismatch(encoder, record):
    with pytest.raises(EncodingError):
        encoder.encode(record)


@pytest.mark.parametrize(
    "record",
    [
        {"name": "Eve", "id": "not-a-number"},
        {"name": None, "id": 1},
        {"name": "Eve", "id": 2**64},
    ],
)
def test_wrong_types(encoder, record):
    with pytest.raises(EncodingError) as exc_info:
        encoder.encode(record)
    assert exc_info.value.__cause__ is not None


def test_not_a_record(encoder):
    with pytest.raises(EncodingError):
        encoder.encode(42)


def test_encoding_error_is_io_error(encoder):
    with pytest.raises(IOError):
        encoder.encode({"name": "x"})


def test_decode_garbage():
    with pytest.raises(EncodingError):
        decode_payload(b"definitely not avro")


def test_decode_single_rejects_multi_record_container():
    buf = io.BytesIO()
    fastavro.writer(buf, fastavro.parse_schema(dict(EMPLOYEE_SCHEMA)), [{"name": "a", "id": 1}, {"name": "b", "id": 2}])
    with pytest.raises(EncodingError):
        decode_single(buf.getvalue())


@pytest.mark.parametrize(
    "name, id_",
    [
        ("Alice", 42),
        ("", 0),
        ("Min", -(2**63)),
        ("Max", 2**63 - 1),
        ("Zoë Ångström", 7),
        ("山田太郎", 8),
        ("emoji 🚀", 9),
        ("x" * 100_000, 10),
    ],
)
def test_round_trip_values(encoder, name, id_):
    assert decode_single(encoder.encode(Employee(name=name, id=id_))) == {"name": name, "id": id_}


def test_record_with_other_schema_rejected(encoder):
    class Contractor:
        schema = {
            "type": "record",
            "name": "Contractor",
            "namespace": "hr",
            "fields": [
                {"name": "name", "type": "string"},
                {"name": "id", "type": "long"},
            ],
        }

        def __init__(self, name, id):
            self.name = name
            self.id = id

        def to_record(self):
            return {"name": self.name, "id": self.id}

    with pytest.raises(EncodingError, match="does not match"):
        encoder.encode(Contractor("Zed", 9))


def test_record_with_same_schema_and_different_field_type_rejected(encoder):
    class NarrowEmployee(Employee):
        schema = {
            "type": "record",
            "name": "Employee",
            "namespace": "demo",
            "fields": [
                {"name": "name", "type": "string"},
                {"name": "id", "type": "int"},
            ],
        }

    with pytest.raises(EncodingError):
        encoder.encode(NarrowEmployee(name="a", id=1))


def test_uncomparable_extra_keys(encoder):
    with pytest.raises(EncodingError, match="extra"):
        encoder.encode({"name": "a", "id": 1, 2: "x", b"k": 1})


def test_to_record_returning_non_mapping(encoder):
    class Broken:
        def to_record(self):
            return 5

    with pytest.raises(EncodingError) as exc_info:
        encoder.encode(Broken())
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_writer_io_failure_is_wrapped(encoder, monkeypatch):
    def failing_writer(*_args, **_kwargs):
        raise OSError("disk on fire")

    monkeypatch.setattr(fastavro, "writer", failing_writer)
    with pytest.raises(EncodingError) as exc_info:
        encoder.encode(Employee(name="a", id=1))
    assert isinstance(exc_info.value.__cause__, OSError)
