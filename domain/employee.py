"""Employee – the record type published by this service.

Avro GenericRecord-style: consumers decode with the schema embedded in each
payload, no generated classes required.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

EMPLOYEE_SCHEMA: Dict[str, Any] = {
    "type": "record",
    "name": "Employee",
    "namespace": "demo",
    "fields": [
        {"name": "name", "type": "string"},
        {"name": "id", "type": "long"},
    ],
}


@dataclass(frozen=True)
class Employee:
    name: str
    id: int

    schema: ClassVar[Dict[str, Any]] = EMPLOYEE_SCHEMA

    def to_record(self) -> Dict[str, Any]:
        return {"name": self.name, "id": self.id}
