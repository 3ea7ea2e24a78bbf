"""Command line interface for summarising campaign reports and lead exports."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .config import IngestionSettings, load_configuration, settings_from_config
from .ingestion.exporters import export_records
from .io import load_campaigns, load_leads
from .metrics import compute_summary, top_campaigns

LOGGER = logging.getLogger(__name__)

NO_CAMPAIGN_ROWS_MESSAGE = (
    "No usable rows found. Make sure the report has headers such as "
    "'Campaign name', 'Amount spent' and 'Impressions'."
)
NO_LEAD_ROWS_MESSAGE = "No leads found. The file needs a header line and at least one data row."


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Parse advertising campaign reports and lead exports",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    campaigns = subparsers.add_parser("campaigns", help="Summarise a campaign report")
    _add_common_arguments(campaigns)
    campaigns.add_argument(
        "--top",
        type=int,
        default=20,
        help="Number of highest-spend campaigns to include in the output",
    )

    leads = subparsers.add_parser("leads", help="Normalise a lead export")
    _add_common_arguments(leads)
    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", help="Path to the export (CSV, TSV, TXT or XLSX)")
    parser.add_argument(
        "--config",
        default=None,
        help="Optional configuration file (YAML or JSON) with custom column keywords",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Optional path (CSV, TSV or XLSX) where the decoded records should be written",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    settings = _load_settings(args.config)
    if args.command == "campaigns":
        return _run_campaigns(args, settings)
    return _run_leads(args, settings)


def _load_settings(path: Optional[str]) -> IngestionSettings:
    if not path:
        return IngestionSettings()
    return settings_from_config(load_configuration(path))


def _run_campaigns(args: argparse.Namespace, settings: IngestionSettings) -> int:
    records = load_campaigns(args.input, settings)
    if not records:
        print(NO_CAMPAIGN_ROWS_MESSAGE, file=sys.stderr)
        return 1

    summary = compute_summary(records)
    payload: Dict[str, Any] = {
        "summary": summary.as_dict(),
        "top_campaigns": [
            {
                "name": record.name,
                "spend": record.spend,
                "results": record.results,
                "cpa": record.cpa,
                "ctr": record.ctr,
            }
            for record in top_campaigns(records, args.top)
        ],
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    LOGGER.info("Parsed %s campaigns from %s", len(records), args.input)

    if args.output:
        destination = export_records(records, args.output)
        LOGGER.info("Campaign records written to %s", Path(destination).resolve())
    return 0


def _run_leads(args: argparse.Namespace, settings: IngestionSettings) -> int:
    leads = load_leads(args.input, settings)
    if not leads:
        print(NO_LEAD_ROWS_MESSAGE, file=sys.stderr)
        return 1

    payload = {"count": len(leads), "leads": [lead.as_dict() for lead in leads]}
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    LOGGER.info("Parsed %s leads from %s", len(leads), args.input)

    if args.output:
        destination = export_records(leads, args.output)
        LOGGER.info("Lead records written to %s", Path(destination).resolve())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
