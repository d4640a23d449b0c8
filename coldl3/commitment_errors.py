"""Errors raised while calculating and verifying commitments."""

from __future__ import annotations


class CommitmentError(Exception):
    """Base class for every commitment error."""

    prefix: str | None = None
    default_message = "Commitment error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        if detail is None:
            message = self.default_message
        elif self.prefix:
            message = f"{self.prefix}: {detail}"
        else:
            message = detail
        super().__init__(message)


class HashError(CommitmentError):
    """A commitment hash could not be calculated."""

    prefix = "Hash calculation error"
    default_message = "Hash calculation error"


class InvalidCommitmentData(CommitmentError):
    """The data handed in for a commitment is unusable."""

    prefix = "Invalid commitment data"
    default_message = "Invalid commitment data"


class VerificationFailed(CommitmentError):
    """A commitment did not match its data."""

    prefix = "Verification failed"
    default_message = "Verification failed"