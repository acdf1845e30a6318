"""Object Publisher – SRP: pull records, encode, hand to the bus.

DIP: depends on EventPublisher + SchemaEncoder + an ObjectReader. The record
type only matters to the injected encoder and key function.
"""
from __future__ import annotations

from dataclasses import dataclass
from time import sleep
from typing import Any, Callable, Iterable, Mapping, Optional

from config import Config
from domain.errors import PublishError
from ports.event_publisher import EventPublisher
from ports.schema_encoder import SchemaEncoder
from util.rate_limit import CURVES, TokenBucket


@dataclass
class PublishStats:
    produced: int = 0
    delivered: int = 0
    failed: int = 0
    pending: int = 0


def default_key(record: Any) -> str:
    return str(record.id)


class ObjectPublisher:
    """OCP: new record types plug in an encoder; this loop stays unchanged."""

    def __init__(
        self,
        cfg: Config,
        publisher: EventPublisher,
        encoder: SchemaEncoder,
        key_fn: Callable[[Any], str] = default_key,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.cfg = cfg
        self.publisher = publisher
        self.encoder = encoder
        self.key_fn = key_fn
        self.headers = dict(headers or {})
        self.running = True

    def stop(self) -> None:
        self.running = False

    def _bucket(self) -> Optional[TokenBucket]:
        if self.cfg.target_eps <= 0:
            return None
        try:
            curve = CURVES[self.cfg.traffic_curve]
        except KeyError:
            raise ValueError(f"Unknown traffic curve {self.cfg.traffic_curve!r}") from None
        return TokenBucket(rate=self.cfg.target_eps, curve=curve)

    def _wait_for_token(self, bucket: TokenBucket) -> None:
        bucket.refill()
        while self.running and not bucket.try_consume(1.0):
            self.publisher.poll()
            sleep(0.005)
            bucket.refill()

    def run(self, reader: Iterable[Any]) -> PublishStats:
        stats = PublishStats()
        bucket = self._bucket()
        self.running = True
        # publisher tallies are cumulative; report this run only
        delivered_before, failed_before = self.publisher.delivered, self.publisher.failed
        try:
            for record in reader:
                if bucket is not None:
                    self._wait_for_token(bucket)
                if not self.running:
                    break
                payload = self.encoder.encode(record)
                self.publisher.publish(
                    self.cfg.topic,
                    key=self.key_fn(record),
                    value=payload,
                    headers=self.headers,
                )
                stats.produced += 1
                self.publisher.poll()
        finally:
            stats.pending = self.publisher.flush(self.cfg.flush_timeout)
            stats.delivered = self.publisher.delivered - delivered_before
            stats.failed = self.publisher.failed - failed_before

        if stats.failed or stats.pending:
            raise PublishError(
                f"{stats.failed} message(s) failed delivery, {stats.pending} still queued "
                f"after {self.cfg.flush_timeout}s flush"
            )
        return stats
