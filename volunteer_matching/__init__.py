"""
Volunteer Opportunity Matching

Scores volunteer opportunities against a volunteer's preferences:
1. Six independent factors (location type, interests, age, time,
   location, skills) summed into a 0-100 score
2. Up to three human-readable reasons per match

Usage:
    from volunteer_matching import calculate_match_score

    result = calculate_match_score(opportunity, profile)
    print(f"Match: {result.score}%")
"""

from .matcher import rank_opportunities
from .models import (
    AgeRange, MatchResult, Opportunity, OpportunityRecord,
    RankedOpportunity, VolunteerProfile
)
from .scoring_engine import calculate_match_score, get_match_level
from .config import FACTOR_CAPS

__all__ = [
    "calculate_match_score",
    "rank_opportunities",
    "get_match_level",
    "AgeRange",
    "MatchResult",
    "Opportunity",
    "OpportunityRecord",
    "RankedOpportunity",
    "VolunteerProfile",
    "FACTOR_CAPS",
]
__version__ = "1.0.0"
