"""Kafka Publisher – DIP adapter for EventPublisher.

Backpressure-safe publish wrapping SerializingProducer.
"""
from __future__ import annotations

from typing import Mapping, Optional

from confluent_kafka import SerializingProducer

from ports.event_publisher import EventPublisher


class KafkaPublisher(EventPublisher):
    """SRP: only concern is delivery to Kafka.

    Delivery reports are tallied so the pipeline can tell a clean run from a
    lossy one after the final flush.
    """

    def __init__(self, producer: SerializingProducer) -> None:
        self._producer = producer
        self.delivered = 0
        self.failed = 0

    def _on_delivery(self, err, _msg) -> None:
        if err is not None:
            self.failed += 1
            print(f"[deliver-err] {err}", flush=True)
        else:
            self.delivered += 1

    def publish(
        self,
        topic: str,
        key: str,
        value: bytes,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        while True:
            try:
                self._producer.produce(
                    topic=topic,
                    key=key,
                    value=value,
                    headers=list((headers or {}).items()),
                    on_delivery=self._on_delivery,
                )
                break
            except BufferError:
                # local queue full; serve callbacks to drain it
                self._producer.poll(0.05)

    def poll(self) -> None:
        self._producer.poll(0)

    def flush(self, timeout: float = 15.0) -> int:
        return self._producer.flush(timeout)
