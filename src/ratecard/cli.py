"""Command-line interface for pricing quotes.

Provides an argparse-based tool that prices a quote request stored as YAML,
or prints a quick estimate from a follower count. Output formats: table
(default) or JSON.

Usage::

    python -m ratecard.cli quote request.yaml
    python -m ratecard.cli quote request.yaml --format json
    python -m ratecard.cli estimate --followers 25000 --platform instagram --format reel
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from ratecard.config import get_settings
from ratecard.domain.errors import PricingError
from ratecard.domain.models import QuoteRequest
from ratecard.domain.types import ContentFormat
from ratecard.pricing import (
    PricingResult,
    QuickEstimate,
    QuickEstimateRequest,
    calculate_quick_estimate,
)
from ratecard.pricing.tables import DEFAULT_NICHE
from ratecard.quotes import price_quote


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with ``quote`` and ``estimate`` subcommands.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(description="Price creator sponsorship quotes")
    subparsers = parser.add_subparsers(dest="command", required=True)

    quote = subparsers.add_parser("quote", help="Price a quote request stored as YAML")
    quote.add_argument("request", type=Path, help="Path to a YAML quote request")
    quote.add_argument(
        "--format",
        type=str,
        choices=["table", "json"],
        default="table",
        dest="output_format",
        help="Output format (default: table)",
    )

    estimate = subparsers.add_parser("estimate", help="Quick estimate from minimal input")
    estimate.add_argument("--followers", type=int, required=True, help="Total follower count")
    estimate.add_argument("--platform", type=str, required=True, help="Platform, e.g. instagram")
    estimate.add_argument(
        "--format",
        type=str,
        choices=[str(f) for f in ContentFormat],
        required=True,
        dest="content_format",
        help="Content format, e.g. reel",
    )
    estimate.add_argument(
        "--niche",
        type=str,
        default=DEFAULT_NICHE,
        help=f"Primary niche (default: {DEFAULT_NICHE})",
    )
    estimate.add_argument(
        "--output",
        type=str,
        choices=["table", "json"],
        default="table",
        dest="output_format",
        help="Output format (default: table)",
    )

    return parser


def load_request(path: Path) -> QuoteRequest:
    """Load and validate a quote request from a YAML file.

    The file holds ``profile``, ``brief`` and ``fit_score`` mappings.

    Args:
        path: Path to the YAML file.

    Returns:
        The validated QuoteRequest.

    Raises:
        ValueError: If the file is not a YAML mapping.
        pydantic.ValidationError: If the request does not validate.
    """
    raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        msg = f"{path} must contain a YAML mapping"
        raise ValueError(msg)
    return QuoteRequest.model_validate(raw)


def format_table(result: PricingResult) -> str:
    """Format a priced quote as a layer table followed by totals.

    Args:
        result: The priced quote.

    Returns:
        Formatted table string with header row.
    """
    headers = ["Layer", "Value", "Multiplier", "Adjustment"]
    widths = [24, 28, 12, 14]

    def truncate(value: object, width: int) -> str:
        s = str(value)
        if len(s) > width:
            return s[: width - 3] + "..."
        return s

    lines: list[str] = []
    header_line = "  ".join(h.ljust(w) for h, w in zip(headers, widths, strict=True))
    lines.append(header_line)
    lines.append("-" * len(header_line))

    for layer in result.layers:
        cells = [
            truncate(layer.name, widths[0]),
            truncate(layer.base_value, widths[1]),
            truncate(layer.multiplier, widths[2]),
            truncate(layer.adjustment, widths[3]),
        ]
        lines.append("  ".join(c.ljust(w) for c, w in zip(cells, widths, strict=True)))

    symbol = result.currency_symbol
    lines.append("")
    lines.append(f"Pricing model:     {result.pricing_model}")
    lines.append(f"Formula:           {result.formula}")
    lines.append(f"Per deliverable:   {symbol}{result.price_per_deliverable}")
    lines.append(f"Quantity:          {result.quantity}")
    lines.append(f"Total:             {symbol}{result.total_price} {result.currency}")
    lines.append(f"Valid for:         {result.valid_days} days")
    return "\n".join(lines)


def format_estimate(estimate: QuickEstimate) -> str:
    """Format a quick estimate as human-readable lines."""
    lines = [
        f"Tier:              {estimate.tier_name}",
        f"Estimated rate:    ${estimate.base_rate} (${estimate.min_rate} - ${estimate.max_rate})",
        f"Percentile:        {estimate.percentile}",
        (
            f"Top performers:    ${estimate.top_performer_range.min}"
            f" - ${estimate.top_performer_range.max}"
        ),
        f"Full potential:    ${estimate.potential_with_full_profile}",
    ]
    if estimate.rate_influencers:
        lines.append("Could raise your rate:")
        lines.extend(f"  - {f.name} ({f.impact})" for f in estimate.rate_influencers)
    return "\n".join(lines)


def _configure_cli_logging() -> None:
    # Keep stdout for results; only warnings and errors go to stderr.
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, price the request or estimate, and print the result."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_cli_logging()

    if args.command == "estimate":
        try:
            estimate_request = QuickEstimateRequest(
                follower_count=args.followers,
                platform=args.platform,
                content_format=ContentFormat(args.content_format),
                niche=args.niche,
            )
        except ValidationError as exc:
            parser.error(str(exc))
        estimate = calculate_quick_estimate(estimate_request)
        if args.output_format == "json":
            print(estimate.model_dump_json(indent=2))
        else:
            print(format_estimate(estimate))
        return

    try:
        request = load_request(args.request)
        result = price_quote(request, get_settings())
    except (OSError, ValueError, ValidationError, PricingError) as exc:
        parser.error(str(exc))

    if args.output_format == "json":
        print(result.model_dump_json(indent=2))
    else:
        print(format_table(result))


if __name__ == "__main__":
    main()
