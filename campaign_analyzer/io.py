"""Input helpers that turn uploaded report files into engine input."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .config import IngestionSettings
from .ingestion.loaders import parse_campaigns, parse_leads
from .ingestion.tokenizer import COMMA, SEMICOLON, TAB, detect_delimiter
from .models import CampaignRecord, LeadRecord

LOGGER = logging.getLogger(__name__)

_TEXT_SUFFIXES = {".csv", ".tsv", ".txt"}
_EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
_SHEET_DELIMITERS = (TAB, SEMICOLON, COMMA)
_BREAKS = re.compile(r"[\r\n\t]+")


class UnsupportedFileTypeError(ValueError):
    """Raised when an unsupported file format is passed to the loader."""


def read_table_text(path: str | Path, *, sheet_name: str | int = 0) -> str:
    """Return the contents of a report file as delimited text.

    Text exports are returned as-is (a UTF-8 BOM is dropped). Spreadsheets
    are read cell-by-cell as strings, blank rows are dropped and line breaks
    inside cells are flattened to spaces. The sheet is then re-serialised
    with the first separator that the delimiter detector picks back up from
    the header, so it goes through the same decoding path as CSV uploads.
    """

    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(file_path)

    suffix = file_path.suffix.lower()
    if suffix in _TEXT_SUFFIXES:
        return file_path.read_text(encoding="utf-8-sig")

    if suffix in _EXCEL_SUFFIXES:
        dataframe = pd.read_excel(file_path, sheet_name=sheet_name, dtype=str, engine="openpyxl")
        dataframe = dataframe.dropna(how="all").fillna("")
        LOGGER.debug("Read %s rows from spreadsheet %s", len(dataframe), file_path)
        return _serialise_sheet(dataframe)

    raise UnsupportedFileTypeError(f"Unsupported file extension: {file_path.suffix}")


def _flatten(text: str) -> str:
    return _BREAKS.sub(" ", str(text)).strip()


def _serialise_sheet(dataframe: pd.DataFrame) -> str:
    # the engine splits on line breaks before tokenizing, so none may survive
    dataframe = dataframe.copy()
    dataframe.columns = [_flatten(column) for column in dataframe.columns]
    dataframe = dataframe.apply(lambda column: column.map(_flatten))

    header = dataframe.columns.tolist()
    if not header:
        return ""
    for delimiter in _SHEET_DELIMITERS:
        header_line = pd.DataFrame(columns=header).to_csv(index=False, sep=delimiter).splitlines()[0]
        if detect_delimiter(header_line) == delimiter:
            return dataframe.to_csv(index=False, sep=delimiter)

    LOGGER.warning("No separator round-trips the spreadsheet header %s; using tabs", header)
    return dataframe.to_csv(index=False, sep=TAB)


def load_campaigns(path: str | Path, settings: Optional[IngestionSettings] = None) -> List[CampaignRecord]:
    settings = settings or IngestionSettings()
    return parse_campaigns(
        read_table_text(path),
        columns=settings.campaign_columns,
        skip_name_keywords=settings.skip_name_keywords,
    )


def load_leads(path: str | Path, settings: Optional[IngestionSettings] = None) -> List[LeadRecord]:
    settings = settings or IngestionSettings()
    return parse_leads(read_table_text(path), columns=settings.lead_columns)


__all__ = ["UnsupportedFileTypeError", "load_campaigns", "load_leads", "read_table_text"]
