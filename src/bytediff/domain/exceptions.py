"""
Domain exceptions.

Only caller-input problems are modelled here. Storage failures are not
wrapped and reach the caller as raised by the storage layer.
"""


class BytediffError(Exception):
    """Base class for bytediff errors."""


class InvalidPayloadError(BytediffError, ValueError):
    """Payload data could not be decoded."""


class MissingPayloadError(InvalidPayloadError):
    """No payload data was provided."""
