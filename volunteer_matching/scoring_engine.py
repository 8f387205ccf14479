"""
Deterministic Scoring Engine

Scores a volunteer opportunity against a volunteer's preferences.
All scoring functions are pure - same inputs produce same outputs, and
no input is modified.
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple, Union
from .config import (
    FACTOR_CAPS, MAX_SCORE, AGE_SCORES, AGE_CLOSE_YEARS,
    TIME_COMMITMENT_SCORES, HOURS_PATTERN, LOCATION_SCORES,
    MAX_TAGS_IN_REASON, MAX_REQUIREMENTS_IN_REASON, MAX_REASONS,
    REASONS, MATCH_LEVELS
)
from .models import AgeRange, MatchResult, Opportunity, VolunteerProfile

logger = logging.getLogger(__name__)

FactorScore = Tuple[float, Optional[str]]

_HOURS_RE = re.compile(HOURS_PATTERN, re.ASCII)


def _matches_any(value: str, candidates: List[str]) -> bool:
    """Case-insensitive substring test in either direction."""
    value_lower = value.lower()
    for candidate in candidates:
        candidate_lower = candidate.lower()
        if candidate_lower in value_lower or value_lower in candidate_lower:
            return True
    return False


def extract_hours(time_commitment: Optional[str]) -> Optional[float]:
    """
    Extract a representative hour value from a time commitment string.

    Examples:
        "2-4 hours/week" -> 3.0
        "5 hours/month" -> 5.0
        "Flexible" -> None

    Only ASCII digits count. Numbers too large to convert are unparseable.
    """
    if not time_commitment:
        return None

    match = _HOURS_RE.search(time_commitment)
    if not match:
        return None

    try:
        low = int(match.group(1))
        high = int(match.group(2)) if match.group(2) is not None else low
        return (low + high) / 2
    except (ValueError, OverflowError):
        logger.debug(f"Time commitment: hour value out of range in {time_commitment[:40]!r}")
        return None


def calculate_location_type_score(
    location_type: str,
    preferred_types: List[str]
) -> FactorScore:
    """
    Calculate location type preference score (0-20).

    Full cap when the opportunity's type is one the volunteer selected.

    Args:
        location_type: Opportunity type (In-Person, Remote or Hybrid)
        preferred_types: Types the volunteer is open to

    Returns:
        (points, reason) - reason is None when nothing matched
    """
    if location_type in preferred_types:
        points = FACTOR_CAPS["location_type"]
        logger.debug(f"Location type: {location_type} preferred, score = {points}")
        return points, REASONS["location_type"].format(location_type=location_type)
    return 0, None


def calculate_tags_score(
    tags: List[str],
    interests: List[str],
    causes: List[str]
) -> FactorScore:
    """
    Calculate interest/cause overlap with the opportunity's tags (0-25).

    Formula: min(25, (matching_tags / total_tags) * 25)

    The partial score is not rounded; the total is rounded once at the end.

    Args:
        tags: Opportunity tags
        interests: Volunteer interests
        causes: Volunteer causes

    Returns:
        (points, reason) naming up to three matching tags
    """
    if not tags or not (interests or causes):
        return 0, None

    matching_tags = [
        tag for tag in tags
        if _matches_any(tag, interests) or _matches_any(tag, causes)
    ]
    if not matching_tags:
        logger.debug(f"Tags: 0/{len(tags)} matched")
        return 0, None

    cap = FACTOR_CAPS["tags"]
    points = min(cap, (len(matching_tags) / len(tags)) * cap)
    logger.debug(f"Tags: {len(matching_tags)}/{len(tags)} matched, score = {points:.2f}")
    reason = REASONS["tags"].format(tags=", ".join(matching_tags[:MAX_TAGS_IN_REASON]))
    return points, reason


def calculate_age_score(
    age: Optional[int],
    age_range: Optional[AgeRange]
) -> FactorScore:
    """
    Calculate age eligibility fit.

    - Age within [min, max]: 15
    - Age within 1 year of either bound: 10
    - Age known but range unspecified: 5 (no reason)

    Args:
        age: Volunteer age, if given
        age_range: Opportunity eligibility range, if given

    Returns:
        (points, reason)
    """
    if age is None:
        return 0, None

    if age_range is None or not age_range.is_specified:
        points = AGE_SCORES["range_unspecified"]
        logger.debug(f"Age: range unspecified, partial score = {points}")
        return points, None

    if age_range.min <= age <= age_range.max:
        logger.debug(f"Age: {age} within {age_range.min}-{age_range.max}")
        return AGE_SCORES["exact_fit"], REASONS["exact_age"]

    if (abs(age - age_range.min) <= AGE_CLOSE_YEARS or
            abs(age - age_range.max) <= AGE_CLOSE_YEARS):
        logger.debug(f"Age: {age} close to {age_range.min}-{age_range.max}")
        return AGE_SCORES["close"], REASONS["close_age"]

    logger.debug(f"Age: {age} outside {age_range.min}-{age_range.max}")
    return 0, None


def calculate_time_commitment_score(
    preferred: Optional[str],
    offered: Optional[str]
) -> FactorScore:
    """
    Calculate time commitment fit from two free-text hour ranges (0-15).

    Formula based on the hour difference:
    - 0: 15
    - up to 2: 10
    - up to 5: 5 (no reason)
    - more: 0

    Strings without a number ("Flexible", "a few hours") score 0.

    Args:
        preferred: Volunteer's desired time commitment
        offered: Opportunity's time commitment

    Returns:
        (points, reason)
    """
    preferred_hours = extract_hours(preferred)
    offered_hours = extract_hours(offered)
    if preferred_hours is None or offered_hours is None:
        logger.debug(f"Time commitment: unparseable ({preferred!r} vs {offered!r})")
        return 0, None

    difference = abs(preferred_hours - offered_hours)
    for max_difference, points, reason_key in TIME_COMMITMENT_SCORES:
        if difference <= max_difference:
            logger.debug(f"Time commitment: difference {difference}h, score = {points}")
            return points, REASONS[reason_key] if reason_key else None

    logger.debug(f"Time commitment: difference {difference}h, score = 0")
    return 0, None


def calculate_location_score(
    location_type: str,
    location: Optional[str],
    preferred_types: List[str],
    preferred_locations: List[str]
) -> FactorScore:
    """
    Calculate location fit.

    Remote opportunities score when the volunteer accepts remote work.
    In-person opportunities score when their location matches a preferred
    area, or get partial credit when no area is set. Hybrid scores 0 here.

    Args:
        location_type: Opportunity type
        location: Opportunity location name
        preferred_types: Types the volunteer is open to
        preferred_locations: Cities/regions the volunteer prefers

    Returns:
        (points, reason)
    """
    if location_type == "Remote":
        if "Remote" in preferred_types:
            return LOCATION_SCORES["remote_match"], REASONS["remote"]
        return 0, None

    if location_type == "In-Person" and location:
        if not preferred_locations:
            return LOCATION_SCORES["no_preference"], None
        if _matches_any(location, preferred_locations):
            logger.debug(f"Location: {location} in preferred areas")
            return LOCATION_SCORES["area_match"], REASONS["area"]
        logger.debug(f"Location: {location} not in preferred areas")

    return 0, None


def calculate_skills_score(
    requirements: List[str],
    skills: List[str]
) -> FactorScore:
    """
    Calculate skills score (0 or 10).

    The full cap is awarded if any requirement matches a volunteer skill;
    the score is not proportional.

    Args:
        requirements: Opportunity requirements
        skills: Volunteer skills

    Returns:
        (points, reason) naming up to two matching requirements
    """
    if not requirements or not skills:
        return 0, None

    matching = [req for req in requirements if _matches_any(req, skills)]
    if not matching:
        return 0, None

    logger.debug(f"Skills: {len(matching)}/{len(requirements)} requirements matched")
    reason = REASONS["skills"].format(
        requirements=", ".join(matching[:MAX_REQUIREMENTS_IN_REASON])
    )
    return FACTOR_CAPS["skills"], reason


def _round_half_up(value: float) -> int:
    """Round .5 up (12.5 -> 13), unlike round()."""
    return int(math.floor(value + 0.5))


def unavailable_result(opportunity_id: str = "") -> MatchResult:
    """Score-0 result for an opportunity that could not be scored."""
    return MatchResult(
        opportunity_id=opportunity_id,
        score=0,
        match_reasons=[REASONS["unavailable"]],
    )


def calculate_match_score(
    opportunity: Union[Opportunity, Mapping[str, Any], None],
    profile: Union[VolunteerProfile, Mapping[str, Any], None]
) -> MatchResult:
    """
    Calculate the match between an opportunity and a volunteer profile.

    Factor contributions are summed, rounded half-up once, and clamped to
    100. Reasons are kept in factor order and limited to three.

    Args:
        opportunity: Opportunity model or mapping (None is tolerated)
        profile: VolunteerProfile model or mapping (None is tolerated)

    Returns:
        MatchResult with an integer score from 0-100

    Raises:
        pydantic.ValidationError: If a mapping does not describe a valid record
    """
    if isinstance(opportunity, Mapping):
        opportunity = Opportunity.model_validate(opportunity)
    if isinstance(profile, Mapping):
        profile = VolunteerProfile.model_validate(profile)

    if opportunity is None or profile is None:
        opportunity_id = opportunity.id if opportunity is not None else ""
        logger.warning(f"Missing opportunity or profile, cannot score {opportunity_id!r}")
        return unavailable_result(opportunity_id)

    factors = [
        calculate_location_type_score(opportunity.type, profile.location_types),
        calculate_tags_score(opportunity.tags, profile.interests, profile.causes),
        calculate_age_score(profile.age, opportunity.age_range),
        calculate_time_commitment_score(profile.time_commitment, opportunity.time_commitment),
        calculate_location_score(
            opportunity.type,
            opportunity.location,
            profile.location_types,
            profile.preferred_locations,
        ),
        calculate_skills_score(opportunity.requirements, profile.skills),
    ]

    total = sum(points for points, _ in factors)
    score = min(MAX_SCORE, _round_half_up(total))

    reasons = [reason for _, reason in factors if reason is not None]
    if not reasons:
        reasons = [REASONS["fallback"]]

    logger.info(f"Match score for opportunity {opportunity.id}: {score} (raw {total:.2f})")

    return MatchResult(
        opportunity_id=opportunity.id,
        score=score,
        match_reasons=reasons[:MAX_REASONS],
    )


def get_match_level(score: float) -> str:
    """Map a score to its match tier label."""
    for threshold, label in MATCH_LEVELS:
        if score >= threshold:
            return label
    return MATCH_LEVELS[-1][1]
