"""
Main Matcher Module

Ranks a list of opportunities for one volunteer:
1. Score every opportunity (optionally in parallel)
2. Sort by score, highest first
3. Return each opportunity paired with its match result
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union
from .models import Opportunity, RankedOpportunity, VolunteerProfile
from .scoring_engine import calculate_match_score, unavailable_result

logger = logging.getLogger(__name__)

OpportunityInput = Union[Opportunity, Mapping[str, Any]]


def _score_one(
    index: int,
    opportunity: OpportunityInput,
    profile: Optional[VolunteerProfile]
) -> Optional[RankedOpportunity]:
    try:
        if isinstance(opportunity, Mapping):
            opportunity = Opportunity.model_validate(opportunity)
        return RankedOpportunity(
            opportunity=opportunity,
            match=calculate_match_score(opportunity, profile),
        )
    except Exception as e:
        logger.error(f"Failed to score opportunity {index}: {e}", exc_info=True)
        if isinstance(opportunity, Opportunity):
            return RankedOpportunity(
                opportunity=opportunity,
                match=unavailable_result(opportunity.id),
            )
        # Nothing valid to pair a result with
        return None


def rank_opportunities(
    opportunities: Iterable[OpportunityInput],
    profile: Union[VolunteerProfile, Mapping[str, Any], None],
    max_workers: Optional[int] = None
) -> List[RankedOpportunity]:
    """
    Score opportunities against a profile and sort them by match score.

    Ties keep their input order (the sort is stable).

    Args:
        opportunities: Opportunity models or mappings
        profile: Volunteer preferences
        max_workers: Score in a thread pool of this size when greater than 1

    Returns:
        List of RankedOpportunity, highest score first. Mappings that fail
        validation are logged and left out.

    Example:
        >>> ranked = rank_opportunities(opportunities, profile)
        >>> for item in ranked[:3]:
        >>>     print(f"{item.opportunity.title}: {item.match.score}%")
    """
    opportunities = list(opportunities)
    if isinstance(profile, Mapping):
        profile = VolunteerProfile.model_validate(profile)

    logger.info(f"Ranking {len(opportunities)} opportunities")

    indexes = range(len(opportunities))
    profiles = [profile] * len(opportunities)
    if max_workers and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            scored = list(pool.map(_score_one, indexes, opportunities, profiles))
    else:
        scored = list(map(_score_one, indexes, opportunities, profiles))

    ranked = [item for item in scored if item is not None]
    ranked.sort(key=lambda item: item.match.score, reverse=True)

    if ranked:
        logger.info(f"Top match: {ranked[0].opportunity.id} ({ranked[0].match.score}%)")

    return ranked
