"""SRP: one place to parse and hold configuration.

Keep it simple; no side effects beyond reading environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """DIP: services consume Config, not raw env.

    Batching knobs map onto the producer's own batching settings.
    """

    # Kafka
    bootstrap: str = "kafka:9092"
    topic: str = "employees.v1"
    create_topic: bool = False

    # Volume / pacing
    num_messages: int = 100
    target_eps: float = 0.0  # 0 disables pacing
    traffic_curve: str = "flat"  # "flat" | "diurnal"

    # Batching
    batch_bytes: int = 5000
    batch_messages: int = 100
    linger_ms: int = 100
    flush_timeout: float = 15.0

    # Avro
    avro_codec: str = "null"  # "null" | "deflate"

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            bootstrap=os.getenv("KAFKA_BOOTSTRAP", "kafka:9092"),
            topic=os.getenv("TOPIC_EMPLOYEES", "employees.v1"),
            create_topic=os.getenv("CREATE_TOPIC", "false").lower() == "true",
            num_messages=int(os.getenv("NUM_MESSAGES", "100")),
            target_eps=float(os.getenv("TARGET_EPS", "0")),
            traffic_curve=os.getenv("TRAFFIC_CURVE", "flat"),
            batch_bytes=int(os.getenv("BATCH_BYTES_THRESHOLD", "5000")),
            batch_messages=int(os.getenv("BATCH_ELEMENT_COUNT", "100")),
            linger_ms=int(os.getenv("BATCH_DELAY_MS", "100")),
            flush_timeout=float(os.getenv("FLUSH_TIMEOUT_S", "15")),
            avro_codec=os.getenv("AVRO_CODEC", "null"),
        )
