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

"""Stderr logger plus the ok/failed tally printed after a multi-file import."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

from owlim.result import FailKind, Result

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


@dataclass
class ImportSummary:
    """Counts files imported and failed in one run; remembers the first failure kind."""

    ok: int = 0
    failed: int = 0
    first_failure: FailKind | None = None

    def record(self, result: Result) -> None:
        if result.ok:
            self.ok += 1
            return
        self.failed += 1
        if self.first_failure is None:
            self.first_failure = result.kind

    def report(self) -> str:
        """Format a human-readable summary block."""
        line = f"import: {self.ok} ok"
        if self.failed:
            line += f"  {self.failed} failed"
        return "\n".join(["", "Summary", "=" * 40, line, "=" * 40])
