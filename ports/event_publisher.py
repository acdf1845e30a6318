"""DIP Port – EventPublisher.

Speak in the language of the domain. The infrastructure implements.
"""
from typing import Mapping, Optional


class EventPublisher:
    """ISP: a narrow interface sufficient for the publishing pipeline.

    publish: enqueue an encoded message with headers for a topic.
    poll: serve delivery callbacks.
    flush: wait for outstanding messages, return how many are still queued.
    delivered / failed: delivery report tallies.
    """

    delivered: int = 0
    failed: int = 0

    def publish(
        self,
        topic: str,
        key: str,
        value: bytes,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    def poll(self) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    def flush(self, timeout: float = 15.0) -> int:  # pragma: no cover - interface only
        raise NotImplementedError
