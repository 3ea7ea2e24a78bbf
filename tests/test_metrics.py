import pytest

from campaign_analyzer.metrics import NO_BEST_CAMPAIGN, compute_summary, top_campaigns
from campaign_analyzer.models import CampaignRecord


def test_compute_summary_of_empty_input() -> None:
    summary = compute_summary([])

    assert summary.total_spend == 0.0
    assert summary.total_impressions == 0.0
    assert summary.total_clicks == 0.0
    assert summary.avg_ctr == 0.0
    assert summary.avg_cpc == 0.0
    assert summary.best_cpa == 0.0
    assert summary.best_campaign_name == NO_BEST_CAMPAIGN
    assert summary.avg_cpa == 0.0


def test_compute_summary_without_results() -> None:
    records = [
        CampaignRecord(name="A", spend=10.0, impressions=100.0, clicks=4.0),
        CampaignRecord(name="B", spend=30.0, impressions=300.0, clicks=6.0),
    ]

    summary = compute_summary(records)

    assert summary.best_cpa == 0.0
    assert summary.best_campaign_name == "N/A"
    assert summary.total_spend == 40.0
    assert summary.avg_ctr == pytest.approx(10 / 400 * 100)
    assert summary.avg_cpc == pytest.approx(4.0)


def test_compute_summary_ties_go_to_first_record() -> None:
    records = [
        CampaignRecord(name="First", spend=100.0, impressions=1.0, clicks=1.0, results=10.0),
        CampaignRecord(name="Second", spend=50.0, impressions=1.0, clicks=1.0, results=5.0),
    ]

    summary = compute_summary(records)

    assert summary.best_campaign_name == "First"
    assert summary.best_cpa == 10.0


def test_compute_summary_picks_strictly_lowest_cpa() -> None:
    records = [
        CampaignRecord(name="Expensive", spend=90.0, clicks=1.0, results=3.0),
        CampaignRecord(name="No results", spend=1.0, clicks=1.0, results=0.0),
        CampaignRecord(name="Cheap", spend=20.0, clicks=1.0, results=4.0),
    ]

    summary = compute_summary(records)

    assert summary.best_campaign_name == "Cheap"
    assert summary.best_cpa == 5.0
    assert summary.total_results == 7.0
    assert summary.avg_cpa == pytest.approx(111.0 / 7.0)


def test_compute_summary_zero_denominators() -> None:
    summary = compute_summary([CampaignRecord(name="Spend only", spend=25.0)])

    assert summary.avg_ctr == 0.0
    assert summary.avg_cpc == 0.0


def test_compute_summary_does_not_touch_input() -> None:
    records = [
        CampaignRecord(name="B", spend=200.0, clicks=1.0, results=1.0),
        CampaignRecord(name="A", spend=100.0, clicks=1.0, results=1.0),
    ]
    snapshot = list(records)

    first = compute_summary(records)
    second = compute_summary(records)

    assert records == snapshot
    assert first == second


def test_summary_as_dict() -> None:
    summary = compute_summary([CampaignRecord(name="A", spend=10.0, impressions=100.0, clicks=5.0, results=2.0)])

    assert summary.as_dict() == {
        "total_spend": 10.0,
        "total_impressions": 100.0,
        "total_clicks": 5.0,
        "avg_ctr": 5.0,
        "avg_cpc": 2.0,
        "best_campaign_name": "A",
        "best_cpa": 5.0,
        "total_results": 2.0,
        "avg_cpa": 5.0,
    }


def test_top_campaigns_orders_by_spend() -> None:
    records = [
        CampaignRecord(name="Low", spend=1.0),
        CampaignRecord(name="High", spend=300.0),
        CampaignRecord(name="Mid A", spend=50.0),
        CampaignRecord(name="Mid B", spend=50.0),
    ]

    assert [record.name for record in top_campaigns(records)] == ["High", "Mid A", "Mid B", "Low"]
    assert [record.name for record in top_campaigns(records, limit=2)] == ["High", "Mid A"]
    assert top_campaigns(records, limit=0) == []
    assert [record.name for record in records] == ["Low", "High", "Mid A", "Mid B"]
