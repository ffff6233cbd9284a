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

"""HTTP transport using urllib.

Sends requests to the store and returns the raw body or an open response.
No domain logic — pure transport layer. Errors become Fail(kind=TRANSPORT).
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from collections.abc import Iterator
from http.client import HTTPException, HTTPResponse
from typing import IO

import certifi

from owlim.logger import get_logger
from owlim.result import Fail, FailKind, Ok, Result

log = get_logger(__name__)

_ssl_ctx = ssl.create_default_context(cafile=certifi.where())


def open_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: bytes | IO[bytes] | None = None,
    timeout: int = 30,
) -> Result[HTTPResponse]:
    """Send a request and return the open response. The caller closes it."""
    req = urllib.request.Request(url, data=body, headers=headers or {}, method=method)

    size = len(body) if isinstance(body, bytes) else (headers or {}).get("Content-Length", 0)
    log.info("%s %s (%s bytes)", method, url.split("?", 1)[0], size)

    try:
        resp = urllib.request.urlopen(req, timeout=timeout, context=_ssl_ctx)
    except urllib.error.HTTPError as exc:
        detail = exc.read().decode("utf-8", errors="replace")[:500]
        log.warning("%s %s → HTTP %s", method, url.split("?", 1)[0], exc.code)
        return Fail(
            error=f"HTTP {exc.code}: {exc.reason}",
            kind=FailKind.TRANSPORT,
            context=detail,
        )
    except urllib.error.URLError as exc:
        log.warning("%s %s → %s", method, url.split("?", 1)[0], exc.reason)
        return Fail(error=f"Connection error: {exc.reason}", kind=FailKind.TRANSPORT, context=url)
    except TimeoutError:
        return Fail(error=f"Timeout after {timeout}s", kind=FailKind.TRANSPORT, context=url)
    except (OSError, HTTPException) as exc:
        log.warning("%s %s → %s", method, url.split("?", 1)[0], exc)
        return Fail(error=f"Connection error: {exc!r}", kind=FailKind.TRANSPORT, context=url)

    return Ok(data=resp)


def request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: bytes | IO[bytes] | None = None,
    timeout: int = 30,
) -> Result[bytes]:
    """Single request, fully read."""
    opened = open_request(method, url, headers=headers, body=body, timeout=timeout)
    if not opened.ok:
        return opened  # type: ignore[return-value]

    try:
        with opened.data as resp:
            return Ok(data=resp.read())
    except TimeoutError:
        return Fail(error=f"Timeout after {timeout}s", kind=FailKind.TRANSPORT, context=url)
    except (OSError, HTTPException) as exc:
        return Fail(error=f"Read error: {exc!r}", kind=FailKind.TRANSPORT, context=url)


def iter_chunks(resp: HTTPResponse, chunk_size: int = 8192) -> Iterator[bytes]:
    """Yield body chunks as they arrive; closes the response when done."""
    try:
        while True:
            chunk = resp.read(chunk_size)
            if not chunk:
                break
            yield chunk
    finally:
        resp.close()
