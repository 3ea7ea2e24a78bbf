"""Tabular ingestion engine: tokenizing, header mapping and row decoding."""
from __future__ import annotations

from .exporters import campaigns_to_dataframe, export_records, leads_to_dataframe, records_to_dataframe
from .headers import CAMPAIGN_COLUMNS, LEAD_COLUMNS, MISSING, ColumnIndexMap, map_columns, normalize_header
from .loaders import parse_campaigns, parse_leads
from .numbers import parse_number
from .tokenizer import detect_delimiter, split_line, split_lines

__all__ = [
    "CAMPAIGN_COLUMNS",
    "ColumnIndexMap",
    "LEAD_COLUMNS",
    "MISSING",
    "campaigns_to_dataframe",
    "detect_delimiter",
    "export_records",
    "leads_to_dataframe",
    "map_columns",
    "normalize_header",
    "parse_campaigns",
    "parse_leads",
    "parse_number",
    "records_to_dataframe",
    "split_line",
    "split_lines",
]
