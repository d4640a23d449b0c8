"""Errors raised by the bridge."""

from __future__ import annotations


class BridgeError(Exception):
    """Base class for every bridge error."""

    prefix: str | None = None
    default_message = "Bridge error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        if detail is None:
            message = self.default_message
        elif self.prefix:
            message = f"{self.prefix}: {detail}"
        else:
            message = detail
        super().__init__(message)


class BridgeNotRunning(BridgeError):
    """An operation needs a running bridge."""

    default_message = "Bridge is not running"


class InvalidHeader(BridgeError):
    """A header did not pass verification."""

    default_message = "Invalid header"


class ArbitrumError(BridgeError):
    """The Arbitrum client failed."""

    prefix = "Arbitrum client error"
    default_message = "Arbitrum client error"


class FuegoError(BridgeError):
    """Header verification against Fuego failed."""

    prefix = "Fuego verification error"
    default_message = "Fuego verification error"


class RelayerError(BridgeError):
    """A relay operation failed."""

    prefix = "Relayer error"
    default_message = "Relayer error"


class ProofSubmissionError(BridgeError):
    """A proof could not be submitted."""

    prefix = "Proof submission error"
    default_message = "Proof submission error"