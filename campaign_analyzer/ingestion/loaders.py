"""Row decoders turning raw export text into campaign and lead records."""
from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, Tuple

from ..models import CampaignRecord, LeadRecord, LeadStatus
from .headers import CAMPAIGN_COLUMNS, LEAD_COLUMNS, ColumnIndexMap, ColumnKeywords, map_columns
from .numbers import parse_number
from .tokenizer import detect_delimiter, split_line, split_lines

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]

SKIP_NAME_KEYWORDS: Sequence[str] = ("total", "results")
UNNAMED_LEAD = "Lead Sem Nome"
UNKNOWN_CAMPAIGN = "Desconhecida"

_NON_DIGIT = re.compile(r"[^0-9]")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso_timestamp(moment: datetime) -> str:
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _read_table(raw_text: str, columns: ColumnKeywords) -> Tuple[List[str], str, Optional[ColumnIndexMap]]:
    lines = split_lines(raw_text)
    if len(lines) < 2:
        return lines, ",", None

    delimiter = detect_delimiter(lines[0])
    headers = split_line(lines[0], delimiter)
    indices = map_columns(headers, columns)
    LOGGER.debug("Detected delimiter %r, resolved columns %s", delimiter, dict(indices))
    return lines, delimiter, indices


def parse_campaigns(
    raw_text: str,
    *,
    columns: ColumnKeywords = CAMPAIGN_COLUMNS,
    skip_name_keywords: Sequence[str] = SKIP_NAME_KEYWORDS,
) -> List[CampaignRecord]:
    """Decode a campaign report export into :class:`CampaignRecord` values.

    Missing numeric columns count as zero and unnamed rows get a positional
    name. Total/summary rows (name containing a skip keyword) and rows with
    no spend, impressions or clicks are left out. An empty list means no
    usable row survived.
    """

    lines, delimiter, indices = _read_table(raw_text, columns)
    if indices is None:
        return []

    records: List[CampaignRecord] = []
    for row_number, line in enumerate(lines[1:], start=1):
        values = split_line(line, delimiter)
        if not values:
            continue

        spend = parse_number(indices.cell(values, "spend"))
        impressions = parse_number(indices.cell(values, "impressions"))
        clicks = parse_number(indices.cell(values, "clicks"))
        results = parse_number(indices.cell(values, "results"))
        name = indices.cell(values, "name") or f"Campaign {row_number}"

        lowered = name.lower()
        if any(keyword in lowered for keyword in skip_name_keywords):
            continue
        if spend == 0 and impressions == 0 and clicks == 0:
            continue

        records.append(
            CampaignRecord(
                name=name,
                spend=spend,
                impressions=impressions,
                clicks=clicks,
                results=results,
            )
        )

    LOGGER.debug("Decoded %s campaign rows out of %s", len(records), len(lines) - 1)
    return records


def parse_leads(
    raw_text: str,
    *,
    columns: ColumnKeywords = LEAD_COLUMNS,
    clock: Optional[Clock] = None,
) -> List[LeadRecord]:
    """Decode a lead-form export into :class:`LeadRecord` values.

    Every data row yields a lead; blank or missing cells fall back to
    placeholders. Phone numbers are reduced to their digits.
    """

    lines, delimiter, indices = _read_table(raw_text, columns)
    if indices is None:
        return []

    clock = clock or _utc_now
    leads: List[LeadRecord] = []
    for row_number, line in enumerate(lines[1:], start=1):
        values = split_line(line, delimiter)

        leads.append(
            LeadRecord(
                id=indices.cell(values, "id") or f"lead-{row_number}",
                created_time=indices.cell(values, "created_time") or _iso_timestamp(clock()),
                full_name=indices.cell(values, "full_name") or UNNAMED_LEAD,
                email=indices.cell(values, "email"),
                phone_number=_NON_DIGIT.sub("", indices.cell(values, "phone_number")),
                campaign_name=indices.cell(values, "campaign_name") or UNKNOWN_CAMPAIGN,
                status=LeadStatus.NEW,
            )
        )

    LOGGER.debug("Decoded %s lead rows", len(leads))
    return leads


__all__ = ["parse_campaigns", "parse_leads", "SKIP_NAME_KEYWORDS", "UNNAMED_LEAD", "UNKNOWN_CAMPAIGN"]
