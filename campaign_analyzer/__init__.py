"""Top-level package for the campaign report and lead ingestion toolkit."""

from . import models  # noqa: F401
from .ingestion import parse_campaigns, parse_leads, parse_number
from .metrics import compute_summary, top_campaigns
from .models import (
    AnalysisSummary,
    CampaignRecord,
    LeadRecord,
    LeadStatus,
)

__all__ = [
    "AnalysisSummary",
    "CampaignRecord",
    "LeadRecord",
    "LeadStatus",
    "compute_summary",
    "parse_campaigns",
    "parse_leads",
    "parse_number",
    "top_campaigns",
    "ingestion",
]
