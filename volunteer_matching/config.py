"""
Configuration for the volunteer-opportunity match scorer.
Adjust caps, thresholds and reason text here.
"""

# Location types an opportunity can have
LOCATION_TYPES = ("In-Person", "Remote", "Hybrid")

# Maximum points each factor can contribute (totals are clamped to MAX_SCORE)
FACTOR_CAPS = {
    "location_type": 20,
    "tags": 25,
    "age": 15,
    "time_commitment": 15,
    "location": 15,
    "skills": 10,
}

MAX_SCORE = 100

# Age fit scoring
AGE_SCORES = {
    "exact_fit": 15,
    "close": 10,
    "range_unspecified": 5,  # Partial credit when eligibility is unknown
}
AGE_CLOSE_YEARS = 1

# Time commitment scoring: (maximum hour difference, points, reason key)
TIME_COMMITMENT_SCORES = [
    (0, 15, "exact_time"),
    (2, 10, "similar_time"),
    (5, 5, None),
]

# "2-4 hours/week" -> (2, 4); "5 hours/month" -> (5, None)
HOURS_PATTERN = r"(\d+)(?:-(\d+))?"

# Location scoring
LOCATION_SCORES = {
    "remote_match": 15,
    "area_match": 15,
    "no_preference": 5,  # Partial credit if no preferred locations set
}

# How many matching items to name in a reason
MAX_TAGS_IN_REASON = 3
MAX_REQUIREMENTS_IN_REASON = 2
MAX_REASONS = 3

REASONS = {
    "location_type": "{location_type} matches your preference",
    "tags": "Matches your interests: {tags}",
    "exact_age": "Perfect age fit",
    "close_age": "Close age match",
    "exact_time": "Exact time commitment match",
    "similar_time": "Similar time commitment",
    "remote": "Remote work matches your preference",
    "area": "In your preferred area",
    "skills": "Your skills match: {requirements}",
    "fallback": "Opportunity available in your area",
    "unavailable": "Unable to calculate match",
}

# Match level tiers (checked highest first)
MATCH_LEVELS = [
    (80, "Excellent Match"),
    (60, "Great Match"),
    (40, "Good Match"),
    (0, "Potential Match"),
]
