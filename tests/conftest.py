from __future__ import annotations

import pytest

from config import Config


class FakeMsg:
    def __init__(self, topic, key, value, headers):
        self._topic = topic
        self._key = key
        self._value = value
        self._headers = headers

    def topic(self):
        return self._topic

    def key(self):
        return self._key

    def value(self):
        return self._value

    def headers(self):
        return self._headers


class FakeProducer:
    """In-memory stand-in for SerializingProducer.

    Delivery callbacks fire on poll/flush; ``fail_every`` makes every n-th
    message report an error, ``buffer_errors`` raises BufferError that many
    times before accepting a message, ``stuck`` leaves messages queued.
    """

    def __init__(self, fail_every: int = 0, buffer_errors: int = 0, stuck: bool = False) -> None:
        self.fail_every = fail_every
        self.buffer_errors = buffer_errors
        self.stuck = stuck
        self.queue = []
        self.sent = []
        self.polls = 0
        self.flushes = []

    def produce(self, topic, key=None, value=None, headers=None, on_delivery=None):
        if self.buffer_errors > 0:
            self.buffer_errors -= 1
            raise BufferError("Local: Queue full")
        self.queue.append((FakeMsg(topic, key, value, headers), on_delivery))

    def _deliver(self):
        if self.stuck:
            return
        while self.queue:
            msg, cb = self.queue.pop(0)
            self.sent.append(msg)
            n = len(self.sent)
            err = "Broker: timed out" if self.fail_every and n % self.fail_every == 0 else None
            if cb is not None:
                cb(err, msg)

    def poll(self, timeout=None):
        self.polls += 1
        self._deliver()
        return 0

    def flush(self, timeout=None):
        self.flushes.append(timeout)
        self._deliver()
        return len(self.queue)


@pytest.fixture
def cfg() -> Config:
    return Config(bootstrap="localhost:9092", topic="employees.test", num_messages=5, flush_timeout=1.0)


@pytest.fixture
def producer() -> FakeProducer:
    return FakeProducer()
