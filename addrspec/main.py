"""Command line entrypoint for addrspec."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from addrspec.core.config import get_settings
from addrspec.core.exceptions import ConfigurationError, EmailError
from addrspec.core.logging_config import configure_logging
from addrspec.schemas import EmailOptions
from addrspec.services.parser import parse

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addrspec",
        description="Validate email addresses against the RFC 5322 addr-spec subset.",
    )
    parser.add_argument(
        "addresses",
        nargs="*",
        help="Addresses to validate; read one per line from stdin when omitted",
    )
    parser.add_argument(
        "--minimum-sub-domains",
        type=int,
        default=None,
        help="Minimum number of dot-separated labels in a text domain",
    )
    parser.add_argument(
        "--no-domain-literal",
        action="store_true",
        help="Reject bracketed domain literals such as [127.0.0.1]",
    )
    parser.add_argument(
        "--no-display-text",
        action="store_true",
        help="Reject the 'Name <address>' form",
    )
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per address")
    return parser


def _resolve_options(args: argparse.Namespace, defaults: EmailOptions) -> EmailOptions:
    updates = {}
    if args.minimum_sub_domains is not None:
        if args.minimum_sub_domains < 0:
            raise ConfigurationError("--minimum-sub-domains must not be negative")
        updates["minimum_sub_domains"] = args.minimum_sub_domains
    if args.no_domain_literal:
        updates["allow_domain_literal"] = False
    if args.no_display_text:
        updates["allow_display_text"] = False
    return defaults.model_copy(update=updates)


def _iter_addresses(args: argparse.Namespace, stdin: TextIO) -> Iterable[str]:
    if args.addresses:
        yield from args.addresses
        return
    for line in stdin:
        line = line.rstrip("\r\n")
        if line:
            yield line


def _report(address: str, options: EmailOptions, as_json: bool, out: TextIO) -> bool:
    try:
        result = parse(address, options)
    except EmailError as exc:
        logger.debug("Rejected %r: %s", address, exc.kind.value)
        if as_json:
            payload = {"original": address, "error": exc.kind.value, "message": str(exc)}
            out.write(json.dumps(payload, ensure_ascii=False) + "\n")
        else:
            out.write(f"invalid\t{address}\t{exc}\n")
        return False

    if as_json:
        out.write(result.model_dump_json() + "\n")
    else:
        out.write(f"valid\t{address}\t{result.uri}\n")
    return True


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Validate addresses and return the process exit status."""

    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        settings = get_settings()
        configure_logging(settings.log_level)
        options = _resolve_options(args, settings.email_options())
    except ConfigurationError as exc:
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"addrspec: error: {exc}\n")
        return 2

    total = 0
    rejected = 0
    for address in _iter_addresses(args, stdin):
        total += 1
        if not _report(address, options, args.json, stdout):
            rejected += 1

    logger.info("Checked %s addresses, %s rejected", total, rejected)
    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
