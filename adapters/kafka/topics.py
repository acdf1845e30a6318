"""Kafka Topics – SRP: make sure the target topic exists.

Kept as an adapter to avoid leaking AdminClient into services.
"""
from confluent_kafka import KafkaError
from confluent_kafka.admin import AdminClient, NewTopic

from config import Config


def ensure_topic(config: Config, num_partitions: int = 3, replication_factor: int = 1) -> bool:
    """Create the topic if missing. Returns True when it was created."""
    admin = AdminClient({"bootstrap.servers": config.bootstrap})
    futures = admin.create_topics(
        [NewTopic(config.topic, num_partitions=num_partitions, replication_factor=replication_factor)]
    )
    try:
        futures[config.topic].result()
    except Exception as e:
        err = e.args[0] if e.args else None
        if isinstance(err, KafkaError) and err.code() == KafkaError.TOPIC_ALREADY_EXISTS:
            print(f"[emppub] topic {config.topic} already exists", flush=True)
            return False
        raise
    print(f"[emppub] ✅ created topic {config.topic}", flush=True)
    return True
