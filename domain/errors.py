"""Errors – SRP: the failure kinds callers are expected to handle."""


class EncodingError(IOError):
    """A record could not be written into an Avro container."""


class PublishError(IOError):
    """Messages were rejected by the bus or never left the local queue."""
