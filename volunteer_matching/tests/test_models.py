"""
Unit tests for matching models and runtime settings.
"""

import os
import unittest
from unittest.mock import patch
from pydantic import ValidationError
from volunteer_matching import (
    MatchResult, Opportunity, OpportunityRecord, VolunteerProfile,
    calculate_match_score
)
from volunteer_matching.settings import get_settings


class TestOpportunityRecord(unittest.TestCase):
    """Test conversion from stored rows to scoring input."""

    def test_to_opportunity(self):
        record = OpportunityRecord(
            id="opp-1",
            title="Creek Restoration Crew",
            type="In-Person",
            location="Oakland, CA",
            age_min=14,
            age_max=18,
            time_commitment="2-4",
            tags=["Environment"],
            requirements=["Closed-toe shoes"],
        )
        opportunity = record.to_opportunity()

        self.assertEqual(opportunity.id, "opp-1")
        self.assertEqual(opportunity.time_commitment, "2-4 hours/week")
        self.assertEqual(opportunity.age_range.min, 14)
        self.assertEqual(opportunity.age_range.max, 18)
        self.assertEqual(opportunity.location, "Oakland, CA")
        self.assertEqual(opportunity.tags, ["Environment"])

    def test_custom_unit(self):
        record = OpportunityRecord(id="opp-2", type="Remote", time_commitment="5", time_commitment_unit="hours/month")
        self.assertEqual(record.to_opportunity().time_commitment, "5 hours/month")

    def test_missing_fields(self):
        record = OpportunityRecord(id="opp-3", type="Remote", age_min=14, tags=None, requirements=None)
        opportunity = record.to_opportunity()

        self.assertEqual(opportunity.location, "Online")
        self.assertIsNone(opportunity.age_range)
        self.assertIsNone(opportunity.time_commitment)
        self.assertEqual(opportunity.tags, [])
        self.assertEqual(opportunity.requirements, [])

    def test_converted_record_scores(self):
        record = OpportunityRecord(
            id="opp-4", type="In-Person", location="Oakland, CA", time_commitment="3"
        )
        profile = VolunteerProfile(preferred_locations=["Oakland"], time_commitment="2-4 hours/week")
        result = calculate_match_score(record.to_opportunity(), profile)

        # Expected: location 15 + exact time 15
        self.assertEqual(result.score, 30)
        self.assertEqual(result.match_reasons, ["Exact time commitment match", "In your preferred area"])


class TestModelValidation(unittest.TestCase):
    """Test model field handling."""

    def test_opportunity_aliases(self):
        by_alias = Opportunity.model_validate(
            {"id": "a", "type": "Remote", "ageRange": {"min": 1, "max": 2}, "timeCommitment": "3 hours"}
        )
        by_name = Opportunity(id="a", type="Remote", age_range={"min": 1, "max": 2}, time_commitment="3 hours")
        self.assertEqual(by_alias, by_name)

    def test_unknown_location_type(self):
        with self.assertRaises(ValidationError):
            Opportunity(id="a", type="Underwater")
        with self.assertRaises(ValidationError):
            VolunteerProfile(location_types=["Anywhere"])

    def test_match_result_bounds(self):
        with self.assertRaises(ValidationError):
            MatchResult(opportunity_id="a", score=101)
        with self.assertRaises(ValidationError):
            MatchResult(opportunity_id="a", score=50, match_reasons=["1", "2", "3", "4"])

    def test_null_lists_become_empty(self):
        profile = VolunteerProfile(
            interests=None, causes=None, skills=None,
            location_types=None, preferred_locations=None,
        )
        opportunity = Opportunity(id="a", type="Remote", tags=None, requirements=None)

        self.assertEqual(profile.interests, [])
        self.assertEqual(profile.location_types, [])
        self.assertEqual(profile.preferred_locations, [])
        self.assertEqual(opportunity.tags, [])
        self.assertEqual(opportunity.requirements, [])

    def test_profile_defaults(self):
        profile = VolunteerProfile()
        self.assertIsNone(profile.age)
        self.assertIsNone(profile.time_commitment)
        self.assertEqual(profile.interests, [])
        self.assertEqual(profile.preferred_locations, [])


class TestSettings(unittest.TestCase):
    """Test environment-driven settings."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = get_settings()
        self.assertEqual(settings.log_level, "INFO")
        self.assertEqual(settings.rank_max_workers, 1)

    def test_from_environment(self):
        with patch.dict(os.environ, {"MATCHING_LOG_LEVEL": "debug", "RANK_MAX_WORKERS": "4"}):
            settings = get_settings()
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.rank_max_workers, 4)


if __name__ == "__main__":
    unittest.main()
