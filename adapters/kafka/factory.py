"""Kafka Factory – SRP: build the producer and publisher.

DIP: callers receive ports, not concrete libs.
"""
from __future__ import annotations

from confluent_kafka import SerializingProducer
from confluent_kafka.serialization import StringSerializer

from config import Config
from adapters.kafka.publisher import KafkaPublisher


def producer_settings(config: Config) -> dict:
    """Batching thresholds: bytes, element count and delay, whichever trips first."""
    return {
        "bootstrap.servers": config.bootstrap,
        "enable.idempotence": True,
        "acks": "all",
        "linger.ms": config.linger_ms,
        "batch.size": config.batch_bytes,
        "batch.num.messages": config.batch_messages,
        "key.serializer": StringSerializer("utf_8"),
        "queue.buffering.max.messages": 200000,
    }


def build_kafka(config: Config) -> KafkaPublisher:
    return KafkaPublisher(SerializingProducer(producer_settings(config)))
