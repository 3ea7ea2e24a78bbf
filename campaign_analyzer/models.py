"""Typed records produced by the tabular ingestion engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


# --- Campaign Models ---

@dataclass(frozen=True, slots=True)
class CampaignRecord:
    """One advertising campaign row decoded from a report export."""

    name: str
    spend: float = 0.0
    impressions: float = 0.0
    clicks: float = 0.0
    results: float = 0.0

    @property
    def cpa(self) -> float:
        """Cost per result, ``0.0`` when the campaign has no results."""

        return _ratio(self.spend, self.results)

    @property
    def ctr(self) -> float:
        """Click-through rate as a percentage."""

        return _ratio(self.clicks, self.impressions) * 100

    @property
    def cpc(self) -> float:
        return _ratio(self.spend, self.clicks)


@dataclass(frozen=True, slots=True)
class AnalysisSummary:
    """Aggregate metrics derived from a full set of campaign records."""

    total_spend: float
    total_impressions: float
    total_clicks: float
    avg_ctr: float
    avg_cpc: float
    best_campaign_name: str
    best_cpa: float
    total_results: float = 0.0
    avg_cpa: float = 0.0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# --- Lead Models ---

class LeadStatus(str, Enum):
    """Outreach state of a lead. Only the caller ever changes it."""

    NEW = "new"
    CONTACTED = "contacted"


@dataclass(slots=True)
class LeadRecord:
    """Normalized lead imported from a lead-form export."""

    id: str
    created_time: str
    full_name: str
    email: str = ""
    phone_number: str = ""
    campaign_name: str = ""
    status: LeadStatus = LeadStatus.NEW

    def mark_contacted(self) -> None:
        """Flag the lead after an outbound action has been taken."""

        self.status = LeadStatus.CONTACTED

    def as_dict(self) -> Dict[str, Any]:
        row = asdict(self)
        row["status"] = self.status.value
        return row


__all__ = [
    "AnalysisSummary",
    "CampaignRecord",
    "LeadRecord",
    "LeadStatus",
]
