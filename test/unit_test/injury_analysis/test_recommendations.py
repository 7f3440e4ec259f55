"""Unit tests for injury-prevention recommendations."""

import pytest

from totalfit.injury_analysis.recommendations import (
    generate_athlete_recommendations,
    generate_body_part_recommendations,
    generate_risk_message,
    get_body_part_specific_advice,
    get_recommendation_level,
)


@pytest.mark.parametrize(
    "percentage,level",
    [(0, "minimal"), (19, "minimal"), (20, "low"), (40, "medium"), (60, "high"), (79, "high"), (80, "critical")],
)
def test_recommendation_level(percentage, level):
    assert get_recommendation_level(percentage) == level


class TestBodyPartAdvice:
    def test_catalogued_body_part(self):
        advice = get_body_part_specific_advice("right-shoulder", "critical")
        assert advice[0]["title"] == "Immediate Rest for Right Shoulder"
        assert all({"priority", "title", "description"} <= set(item) for item in advice)

    def test_catalogue_entries_are_copies(self):
        advice = get_body_part_specific_advice("chest", "high")
        advice[0]["title"] = "changed"
        assert get_body_part_specific_advice("chest", "high")[0]["title"] != "changed"

    def test_unknown_body_part_gets_generic_item(self):
        assert get_body_part_specific_advice("tail", "high") == [
            {
                "priority": "high",
                "title": "High Risk Detected",
                "description": "Monitor Tail closely and adjust training accordingly.",
            }
        ]

    def test_generic_item_priority_for_lower_levels(self):
        assert get_body_part_specific_advice("tail", "low")[0]["priority"] == "medium"

    def test_body_part_recommendations_are_tagged(self):
        items = generate_body_part_recommendations("left-leg", 85)
        assert items
        assert all(item["bodyPart"] == "left-leg" and item["riskLevel"] == "critical" for item in items)


class TestAthleteRecommendations:
    def test_low_risk_well_recovered_athlete_gets_none(self):
        assert generate_athlete_recommendations(20, [], 95) == []

    def test_all_rules(self):
        items = generate_athlete_recommendations(65, ["chest", "neck"], 50)
        assert [item["title"] for item in items] == [
            "Reduce Training Intensity",
            "Target Recovery for High-Risk Areas",
            "Increase Recovery Time",
        ]
        assert "chest, neck" in items[1]["description"]


@pytest.mark.parametrize(
    "percentage,prefix",
    [(85, "CRITICAL"), (65, "HIGH RISK"), (45, "MODERATE"), (25, "LOW"), (5, "MINIMAL"), (None, "MINIMAL")],
)
def test_risk_message_prefix(percentage, prefix):
    message = generate_risk_message({"injury_risk_percentage": percentage, "body_part": "right-leg"})
    assert message.startswith(prefix)
    assert "right leg" in message
