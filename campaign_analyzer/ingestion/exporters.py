"""Export utilities for decoded campaign and lead records."""
from __future__ import annotations

from pathlib import Path
from typing import List, MutableMapping, Optional, Sequence, Union

import pandas as pd

from ..models import CampaignRecord, LeadRecord

PathLike = Union[str, Path]
RecordLike = Union[CampaignRecord, LeadRecord]

CAMPAIGN_EXPORT_COLUMNS = ["name", "spend", "impressions", "clicks", "results", "cpa", "ctr", "cpc"]
LEAD_EXPORT_COLUMNS = ["id", "created_time", "full_name", "email", "phone_number", "campaign_name", "status"]


def campaigns_to_dataframe(records: Sequence[CampaignRecord]) -> pd.DataFrame:
    """Convert campaign records into a :class:`pandas.DataFrame`, with derived rates."""

    rows = [
        {
            "name": record.name,
            "spend": record.spend,
            "impressions": record.impressions,
            "clicks": record.clicks,
            "results": record.results,
            "cpa": record.cpa,
            "ctr": record.ctr,
            "cpc": record.cpc,
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=CAMPAIGN_EXPORT_COLUMNS)


def leads_to_dataframe(records: Sequence[LeadRecord]) -> pd.DataFrame:
    rows = [record.as_dict() for record in records]
    return pd.DataFrame(rows, columns=LEAD_EXPORT_COLUMNS)


def records_to_dataframe(records: Sequence[RecordLike]) -> pd.DataFrame:
    """Dispatch on the kind of the first record; empty input is a campaign frame."""

    items: List[RecordLike] = list(records or [])
    if items and isinstance(items[0], LeadRecord):
        return leads_to_dataframe(items)  # type: ignore[arg-type]
    return campaigns_to_dataframe(items)  # type: ignore[arg-type]


def export_records(
    records: Sequence[RecordLike],
    path: PathLike,
    *,
    sheet_name: str = "Results",
    exporter_kwargs: Optional[MutableMapping[str, object]] = None,
) -> Path:
    """Write campaign or lead records to a CSV, TSV or Excel file."""

    dataframe = records_to_dataframe(records)
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _write_dataframe(dataframe, output_path, sheet_name=sheet_name, exporter_kwargs=exporter_kwargs)
    return output_path


def _write_dataframe(
    dataframe: pd.DataFrame,
    path: Path,
    *,
    sheet_name: str,
    exporter_kwargs: Optional[MutableMapping[str, object]],
) -> None:
    exporter_kwargs = dict(exporter_kwargs or {})
    suffix = path.suffix.lower()

    if suffix in {".csv", ".tsv"}:
        if suffix == ".tsv":
            exporter_kwargs.setdefault("sep", "\t")
        dataframe.to_csv(path, index=False, **exporter_kwargs)
        return

    if suffix in {".xlsx", ".xlsm"}:
        engine = exporter_kwargs.pop("engine", None) or "openpyxl"
        dataframe.to_excel(path, index=False, sheet_name=sheet_name, engine=engine, **exporter_kwargs)
        return

    raise ValueError(f"Unsupported export file extension: {suffix}")


__all__ = [
    "campaigns_to_dataframe",
    "export_records",
    "leads_to_dataframe",
    "records_to_dataframe",
]
