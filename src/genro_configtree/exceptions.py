# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigTree exceptions."""

from __future__ import annotations


class ConfigTreeError(Exception):
    """Base exception for ConfigTree errors."""

    pass


class InvalidPathError(ConfigTreeError, ValueError):
    """Raised when a path cannot be used to create or move a node."""

    pass


class InvalidStateError(ConfigTreeError, RuntimeError):
    """Raised when an operation is not allowed in the node's current state."""

    pass


class ValueDecodeError(ConfigTreeError, ValueError):
    """Raised when a stored value cannot be composed into the requested type.

    Attributes:
        codec: Name of the codec that rejected the value.
        stored: The stored (string) form that could not be decoded.
    """

    def __init__(self, codec: str, stored: str, reason: str = '') -> None:
        self.codec = codec
        self.stored = stored
        message = f"{codec} cannot decode {stored!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
