from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from fetchdump.core.config import settings
from fetchdump.models.transfer import TransferOptions
from fetchdump.services.dumper import dump
from fetchdump.workers.fetcher import transfer


def _configure_logging() -> None:
    """Configure the ``fetchdump`` logger namespace.

    Log records go to stderr so stdout carries nothing but the body and
    its dump.  Propagation is turned off so a host application's root
    handlers do not print every record twice.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    )
    app_log = logging.getLogger("fetchdump")
    app_log.setLevel(level)
    if not app_log.handlers:
        app_log.addHandler(handler)
    app_log.propagate = False


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {raw!r}")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="fetchdump",
        description="GET a URL with a connect timeout and dump the raw body.",
    )
    p.add_argument("url", nargs="?", default=settings.default_url, help="Request target")
    p.add_argument(
        "--timeout",
        type=_positive_float,
        default=settings.connect_timeout,
        metavar="SECONDS",
        help="Connect timeout in seconds (default: %(default)s)",
    )
    p.add_argument(
        "--no-return-transfer",
        dest="return_transfer",
        action="store_false",
        help="Write the body straight to stdout instead of buffering it",
    )
    p.add_argument(
        "--insecure",
        dest="verify_ssl",
        action="store_false",
        default=settings.verify_ssl,
        help="Skip TLS certificate verification",
    )
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging()

    options = TransferOptions(
        url=args.url,
        connect_timeout=args.timeout,
        return_transfer=args.return_transfer,
        verify_ssl=args.verify_ssl,
    )
    dump(transfer(options))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
