"""CLI entry point for divvi-referral.

Builds and decodes attribution tags, and submits attribution events to the
tracking service.

Examples:
    ```bash
    python -m divvi_referral suffix --consumer 0x12...90 --provider 0x09...21
    python -m divvi_referral tag --user 0xab...cd --consumer 0x12...90
    python -m divvi_referral decode 6decb85d01...
    python -m divvi_referral submit --chain-id 42220 --tx-hash 0x...
    python -m divvi_referral submit --chain-id 42220 --message "..." --signature 0x...
    ```
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import aiohttp
import yaml
from pydantic import ValidationError

from divvi_referral.codec import (
    decode_data_suffix,
    decode_referral_tag,
    get_data_suffix,
    get_referral_tag,
)
from divvi_referral.core.exceptions import DivviError, TagDecodeError
from divvi_referral.core.logger import Logger, StructuredFormatter
from divvi_referral.models.constants import FormatID
from divvi_referral.models.event import (
    AttributionEvent,
    MessageAttribution,
    TransactionAttribution,
)
from divvi_referral.models.tag import DataSuffix, ReferralTag
from divvi_referral.reporter import AttributionReporter, ReporterConfig


ENDPOINT_REFERRAL = "referral"
ENDPOINT_ATTRIBUTION = "attribution"

logger = Logger("divvi_referral.cli")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="divvi-referral",
        description="Referral attribution tag tool",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    suffix = commands.add_parser("suffix", help="Build a calldata suffix")
    suffix.add_argument("--consumer", required=True, help="Consumer address")
    suffix.add_argument(
        "--provider",
        action="append",
        default=[],
        dest="providers",
        help="Provider address (repeatable, order preserved)",
    )
    suffix.add_argument(
        "--legacy",
        action="store_true",
        help="Emit the legacy layout without a format byte",
    )

    tag = commands.add_parser("tag", help="Build a referral tag")
    tag.add_argument("--user", required=True, help="User address")
    tag.add_argument("--consumer", required=True, help="Consumer address")
    tag.add_argument(
        "--provider",
        action="append",
        default=[],
        dest="providers",
        help="Provider address (repeatable, order preserved)",
    )

    decode = commands.add_parser("decode", help="Decode a referral tag or calldata suffix")
    decode.add_argument("data", help="Hex encoded tag (0x prefix optional)")

    submit = commands.add_parser("submit", help="Submit an attribution event")
    submit.add_argument("--chain-id", type=int, required=True, help="Chain ID")
    submit.add_argument("--tx-hash", help="Transaction hash (transaction proof)")
    submit.add_argument("--message", help="Signed message (message proof)")
    submit.add_argument("--signature", help="Message signature (message proof)")
    submit.add_argument(
        "--endpoint",
        choices=[ENDPOINT_REFERRAL, ENDPOINT_ATTRIBUTION],
        default=ENDPOINT_REFERRAL,
        help=f"Endpoint to submit to (default: {ENDPOINT_REFERRAL})",
    )
    submit.add_argument("--base-url", help="Override the endpoint URL for this event")
    submit.add_argument("--config", type=Path, help="Reporter config YAML path")

    args = parser.parse_args(argv)
    if args.command == "submit":
        has_message = args.message is not None or args.signature is not None
        if (args.tx_hash is None) == (not has_message):
            parser.error("submit needs either --tx-hash or both --message and --signature")
        if has_message and (args.message is None or args.signature is None):
            parser.error("--message and --signature must be given together")
    return args


def setup_logging(level: str) -> None:
    """Install ``StructuredFormatter`` on a stderr root handler."""
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level))


def decode_any(data: str) -> DataSuffix | ReferralTag:
    """Decode *data* as a referral tag, falling back to a calldata suffix.

    Raises:
        TagDecodeError: With the calldata-suffix error if neither applies.
    """
    try:
        return decode_referral_tag(data)
    except TagDecodeError:
        return decode_data_suffix(data)


def build_event(args: argparse.Namespace) -> AttributionEvent:
    """Build the attribution event described by the ``submit`` arguments."""
    if args.tx_hash is not None:
        return TransactionAttribution(
            tx_hash=args.tx_hash,
            chain_id=args.chain_id,
            base_url=args.base_url,
        )
    return MessageAttribution(
        message=args.message,
        signature=args.signature,
        chain_id=args.chain_id,
        base_url=args.base_url,
    )


async def submit(args: argparse.Namespace) -> None:
    """Submit one event and print the response body."""
    config = ReporterConfig.from_yaml(args.config) if args.config else ReporterConfig()
    reporter = AttributionReporter(config)
    event = build_event(args)
    if args.endpoint == ENDPOINT_ATTRIBUTION:
        response = await reporter.submit_attribution_event(event)
    else:
        response = await reporter.submit_referral(event)
    print(response.body)


def run(args: argparse.Namespace) -> int:
    """Dispatch a parsed command. Returns the process exit code."""
    try:
        if args.command == "suffix":
            format_id = None if args.legacy else FormatID.DEFAULT
            print(get_data_suffix(args.consumer, args.providers, format_id))
        elif args.command == "tag":
            print(get_referral_tag(args.user, args.consumer, args.providers))
        elif args.command == "decode":
            print(json.dumps(decode_any(args.data).to_dict(), indent=2))
        else:
            asyncio.run(submit(args))
        return 0
    # CLI error boundary: user input, config and submission failures exit 1
    except (
        DivviError,
        aiohttp.ClientError,
        OSError,
        yaml.YAMLError,
        ValidationError,
        ValueError,
    ) as e:
        logger.error(f"{args.command}_failed", error=str(e) or type(e).__name__)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, configure logging, and run the command."""
    args = parse_args(argv)
    setup_logging(args.log_level)
    return run(args)


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
