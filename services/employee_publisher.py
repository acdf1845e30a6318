"""Employee Publisher – wires the Avro container encoder into the pipeline.

Publishes random Employee records; the serialized message is an Avro data
file readable without generated classes.
"""
from __future__ import annotations

from typing import Optional

from adapters.avro.container import AvroContainerEncoder
from config import Config
from domain.employee import EMPLOYEE_SCHEMA
from ports.event_publisher import EventPublisher
from ports.schema_encoder import SchemaEncoder
from services.employees import RandomEmployeeReader
from services.object_publisher import ObjectPublisher, PublishStats

HEADERS = {"entity": "employee", "source": "emppub", "content-type": "avro/binary"}


class EmployeePublisher:
    def __init__(
        self,
        cfg: Config,
        publisher: EventPublisher,
        encoder: Optional[SchemaEncoder] = None,
    ) -> None:
        self.cfg = cfg
        self.pipeline = ObjectPublisher(
            cfg,
            publisher,
            encoder or AvroContainerEncoder(EMPLOYEE_SCHEMA, codec=cfg.avro_codec),
            headers=HEADERS,
        )

    def stop(self) -> None:
        self.pipeline.stop()

    def publish(self) -> PublishStats:
        # demo source: random employees
        reader = RandomEmployeeReader(self.cfg.num_messages)
        return self.pipeline.run(reader)
