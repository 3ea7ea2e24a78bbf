"""Aggregate metrics over decoded campaign records."""
from __future__ import annotations

from typing import List, Sequence

from .models import AnalysisSummary, CampaignRecord

NO_BEST_CAMPAIGN = "N/A"


def compute_summary(records: Sequence[CampaignRecord]) -> AnalysisSummary:
    """Reduce *records* into an :class:`AnalysisSummary`.

    Rates fall back to zero when their denominator is zero. The best
    campaign is the one with the strictly lowest cost per result among
    records with results; on ties the earliest record wins.
    """

    total_spend = sum(record.spend for record in records)
    total_impressions = sum(record.impressions for record in records)
    total_clicks = sum(record.clicks for record in records)
    total_results = sum(record.results for record in records)

    avg_ctr = total_clicks / total_impressions * 100 if total_impressions > 0 else 0.0
    avg_cpc = total_spend / total_clicks if total_clicks > 0 else 0.0
    avg_cpa = total_spend / total_results if total_results > 0 else 0.0

    best_name = NO_BEST_CAMPAIGN
    best_cpa = float("inf")
    for record in records:
        if record.results <= 0:
            continue
        cpa = record.spend / record.results
        if cpa < best_cpa:
            best_cpa = cpa
            best_name = record.name

    if best_cpa == float("inf"):
        best_cpa = 0.0

    return AnalysisSummary(
        total_spend=float(total_spend),
        total_impressions=float(total_impressions),
        total_clicks=float(total_clicks),
        avg_ctr=avg_ctr,
        avg_cpc=avg_cpc,
        best_campaign_name=best_name,
        best_cpa=best_cpa,
        total_results=float(total_results),
        avg_cpa=avg_cpa,
    )


def top_campaigns(records: Sequence[CampaignRecord], limit: int = 20) -> List[CampaignRecord]:
    """Return up to *limit* records ordered by spend, highest first."""

    if limit <= 0:
        return []
    return sorted(records, key=lambda record: record.spend, reverse=True)[:limit]


__all__ = ["compute_summary", "top_campaigns", "NO_BEST_CAMPAIGN"]
