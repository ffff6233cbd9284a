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

"""owlim — HTTP administration and SPARQL client for OWLIM/Sesame triplestores."""

from owlim.client import RepositoryClient
from owlim.config import (
    ClientConfig,
    CreateOptions,
    Endpoint,
    ExportOptions,
    HeadOptions,
    ImportOptions,
    QueryOptions,
    load_config,
)
from owlim.prefixes import PrefixTable, default_prefixes
from owlim.result import Fail, FailKind, Ok, Result
from owlim.results import tabulate

__all__ = [
    "ClientConfig",
    "CreateOptions",
    "Endpoint",
    "ExportOptions",
    "Fail",
    "FailKind",
    "HeadOptions",
    "ImportOptions",
    "Ok",
    "PrefixTable",
    "QueryOptions",
    "RepositoryClient",
    "Result",
    "default_prefixes",
    "load_config",
    "tabulate",
]
