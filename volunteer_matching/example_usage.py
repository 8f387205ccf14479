"""
Example usage of the volunteer opportunity matching system.

Run this file to see the system in action:
    python -m volunteer_matching.example_usage
"""

import logging
from dotenv import load_dotenv
from volunteer_matching import (
    OpportunityRecord, VolunteerProfile, calculate_match_score,
    get_match_level, rank_opportunities
)
from volunteer_matching.settings import get_settings

load_dotenv()

# Sample volunteer, as saved by onboarding (interests double as causes)
PROFILE = VolunteerProfile(
    full_name="Maya Chen",
    age=16,
    interests=["Environment", "Animals"],
    causes=["Environment", "Animals"],
    skills=["Spanish", "Photography"],
    location_types=["In-Person"],
    preferred_locations=["Oakland"],
    time_commitment="3-5 hours/week",
)

# Sample rows from the opportunities table
RECORDS = [
    {
        "id": "opp-1",
        "title": "Creek Restoration Crew",
        "organization": "Friends of Sausal Creek",
        "type": "In-Person",
        "location": "Oakland, CA",
        "tags": ["Environment", "Outdoors"],
        "age_min": 14,
        "age_max": 18,
        "time_commitment": "4",
        "time_commitment_unit": "hours/week",
        "requirements": ["Closed-toe shoes", "Spanish speakers welcome"],
    },
    {
        "id": "opp-2",
        "title": "Shelter Social Media Helper",
        "organization": "East Bay SPCA",
        "type": "Remote",
        "tags": ["Animals", "Marketing"],
        "age_min": 15,
        "age_max": 19,
        "time_commitment": "2-3",
        "requirements": ["Photography"],
    },
    {
        "id": "opp-3",
        "title": "Library Homework Club",
        "organization": "Berkeley Public Library",
        "type": "In-Person",
        "location": "Berkeley, CA",
        "tags": ["Education"],
        "age_min": 16,
        "age_max": 21,
        "time_commitment": "10",
        "requirements": [],
    },
    {
        "id": "opp-4",
        "title": "Food Bank Sorting",
        "organization": "Alameda County Community Food Bank",
        "type": "Hybrid",
        "location": "Oakland, CA",
        "tags": ["Hunger"],
        "time_commitment": "Flexible",
        "requirements": [],
    },
]


def example_single_match():
    """Example 1: Score one opportunity."""
    print("\n" + "="*80)
    print("EXAMPLE 1: Single Match")
    print("="*80)

    opportunity = OpportunityRecord(**RECORDS[0]).to_opportunity()
    result = calculate_match_score(opportunity, PROFILE)

    print(f"\n{opportunity.title} ({opportunity.organization})")
    print(f"  Score: {result.score}% - {get_match_level(result.score)}")
    for reason in result.match_reasons:
        print(f"  - {reason}")
    print(f"{'='*80}\n")


def example_tailored_for_me(max_workers: int):
    """Example 2: Rank and bucket opportunities the way the recommendations page does."""
    print("\n" + "="*80)
    print("EXAMPLE 2: Tailored For Me")
    print("="*80)

    opportunities = [OpportunityRecord(**record).to_opportunity() for record in RECORDS]
    ranked = rank_opportunities(opportunities, PROFILE, max_workers=max_workers)

    top_matches = [item for item in ranked if item.match.score >= 70]
    good_matches = [item for item in ranked if 50 <= item.match.score < 70]

    print(f"\nTop Matches ({len(top_matches)})")
    for item in top_matches:
        badge = " [Top Pick]" if item.match.score >= 90 else ""
        print(f"  {item.match.score:3d}% {item.opportunity.title}{badge}")

    print(f"\nGood Matches ({len(good_matches)})")
    for item in good_matches[:9]:
        print(f"  {item.match.score:3d}% {item.opportunity.title}")

    if not top_matches and not good_matches:
        print("\nNo matches found")

    print(f"\nAll ({len(ranked)})")
    for item in ranked:
        print(f"  {item.match.score:3d}% {item.opportunity.title:32} "
              f"{get_match_level(item.match.score)}")
    print(f"{'='*80}\n")


def main():
    """Run all examples."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    print("\n" + "="*80)
    print("VOLUNTEER OPPORTUNITY MATCHING - EXAMPLES")
    print("="*80)

    example_single_match()
    example_tailored_for_me(settings.rank_max_workers)


if __name__ == "__main__":
    main()
