"""Blocking HTTP fetcher.

Responsible solely for pulling the raw body of a URL.

Each transfer opens its own ``httpx.Client`` and closes it before
returning.  Transport failures never escape: they are logged and the
caller gets ``False`` back.
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Optional, Union

import httpx

from fetchdump.models.transfer import TransferOptions

logger = logging.getLogger(__name__)

TransferResult = Union[bytes, bool]


def build_timeout(connect_timeout: float) -> httpx.Timeout:
    """Bound the connect phase only.  Read, write and pool waits are unlimited."""
    return httpx.Timeout(None, connect=connect_timeout)


def _new_client(options: TransferOptions) -> httpx.Client:
    return httpx.Client(
        timeout=build_timeout(options.connect_timeout),
        verify=options.verify_ssl,
    )


def transfer(
    options: TransferOptions, out: Optional[BinaryIO] = None
) -> TransferResult:
    """Execute one GET described by *options*.

    With ``return_transfer`` set, the whole body is buffered and returned
    as ``bytes``.  Otherwise the body is written to *out* (stdout by
    default) as it arrives and ``True`` is returned.

    The status code is not checked.  Any transport failure (DNS, connect,
    TLS, timeout, malformed URL) yields ``False``.
    """
    if out is None and not options.return_transfer:
        out = sys.stdout.buffer

    client = _new_client(options)
    try:
        logger.debug("GET %s (connect timeout %ss)", options.url, options.connect_timeout)
        if options.return_transfer:
            response = client.get(options.url)
            logger.info(
                "%s -> %s, %d bytes",
                options.url,
                response.status_code,
                len(response.content),
            )
            return response.content

        with client.stream("GET", options.url) as response:
            written = 0
            for chunk in response.iter_bytes():
                out.write(chunk)
                written += len(chunk)
            out.flush()
        logger.info("%s -> %s, %d bytes written", options.url, response.status_code, written)
        return True
    except httpx.InvalidURL as exc:
        logger.warning("Invalid URL '%s': %s", options.url, exc)
    except httpx.RequestError as exc:
        logger.warning("Transfer failed for %s: %s", options.url, exc)
    finally:
        client.close()
    return False


def fetch(url: str, connect_timeout: float = 5.0) -> Union[bytes, bool]:
    """Fetch *url* and return its raw body, or ``False`` if the transfer failed."""
    return transfer(TransferOptions(url=url, connect_timeout=connect_timeout))
