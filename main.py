"""Employee Publisher

Publishes random Employee records to a Kafka topic, one Avro object
container (schema + exactly one record) per message.
Architecture:
- Encoder: Avro container per record, decodable with no generated classes
- Pipeline: pulls from a record source, encodes, publishes, flushes
- Kafka: batching by bytes, element count and linger delay
Configuration comes from the environment (see config.py).

SRP: this module only wires and runs the app; logic lives in services.
DIP: relies on ports and adapters, not concrete libs.
"""
from __future__ import annotations

import signal
import sys

from config import Config
from adapters.kafka.factory import build_kafka
from adapters.kafka.topics import ensure_topic
from domain.errors import EncodingError, PublishError
from services.employee_publisher import EmployeePublisher
from services.object_publisher import PublishStats


class App:
    """SRP: orchestrate lifecycle. No business logic here."""

    def __init__(self, cfg: Config) -> None:
        self.cfg = cfg
        self.service = None

    def _setup(self) -> None:
        if self.cfg.create_topic:
            ensure_topic(self.cfg)
        self.publisher = build_kafka(self.cfg)
        self.service = EmployeePublisher(self.cfg, self.publisher)

    def stop(self) -> None:
        if self.service is not None:
            self.service.stop()

    def run(self) -> PublishStats:
        self._setup()
        print(
            f"[emppub] publishing {self.cfg.num_messages} employees to {self.cfg.topic} "
            f"(batch bytes={self.cfg.batch_bytes}, count={self.cfg.batch_messages}, "
            f"linger={self.cfg.linger_ms}ms)",
            flush=True,
        )
        stats = self.service.publish()
        print(
            f"[emppub] done: produced={stats.produced} delivered={stats.delivered}",
            flush=True,
        )
        return stats


def main() -> int:
    try:
        cfg = Config.from_env()
    except ValueError as e:
        print(f"[emppub] ⚠️ invalid configuration: {e}", file=sys.stderr, flush=True)
        return 1
    app = App(cfg)

    def _sig(*_):
        print("\n🛑 Shutdown signal received – flushing…", flush=True)
        app.stop()

    signal.signal(signal.SIGINT, _sig)
    signal.signal(signal.SIGTERM, _sig)

    try:
        app.run()
    except (EncodingError, PublishError) as e:
        print(f"[emppub] ⚠️ {e}", file=sys.stderr, flush=True)
        return 1
    except ValueError as e:
        print(f"[emppub] ⚠️ invalid configuration: {e}", file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
