# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Result pattern for error handling without exceptions.

Provides Ok[T] and Fail types as an alternative to raising exceptions.
Every client operation that can fail returns Result[T] = Ok[T] | Fail,
and every Fail names its FailKind so callers can tell a transport error
from a malformed response or a missing repository configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FailKind(str, Enum):
    """Failure taxonomy shared by all operations."""

    TRANSPORT = "transport"        # connection, timeout, HTTP error status
    CONTENT_TYPE = "content_type"  # no MIME type resolvable, raised before network
    MALFORMED = "malformed"        # server response could not be parsed
    NOT_FOUND = "not_found"        # blank node of a repository config not resolvable
    IO = "io"                      # local file access
    CONFIG = "config"              # config file missing or invalid


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message, kind and optional context."""

    error: str
    kind: FailKind = FailKind.TRANSPORT
    context: Any = None
    ok: bool = field(default=False, init=False)


Result = Ok[T] | Fail
