# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class AtomicReputationError(Exception):
    """Base class for all atomic-reputation errors."""

    def __init__(self, message: str, code: str = "ATOMIC_REPUTATION_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationError(AtomicReputationError):
    """Raised when the engine is handed an unusable score cap."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR")


class InvalidIdentityError(AtomicReputationError):
    """
    Raised when a reputation record is bound to an incomplete user identity.

    Attributes:
        missing_fields: Names of the identity fields that were blank.
    """

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(
            "User identity is incomplete; blank field(s): "
            f"{', '.join(missing_fields)}.",
            code="INVALID_IDENTITY",
        )
        self.missing_fields = missing_fields
