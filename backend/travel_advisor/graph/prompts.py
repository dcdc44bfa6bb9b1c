"""Prompt construction for the travel research call.

``SECTIONS`` is shared with the response interpreter: the labels listed here
are the literal markers it searches for when the service answers in prose,
so they must only be changed in this one place.
"""

import json
from typing import Any, Dict, List, Tuple

from travel_advisor.models.trip_preferences import DESTINATION, QueryParams, region_name

# (field, label) in the order the service is asked to answer
SECTIONS: List[Tuple[str, str]] = [
    ("summary", "Summary:"),
    ("details", "Details:"),
    ("pros", "Pros:"),
    ("cons", "Cons:"),
    ("places", "Places to Visit:"),
    ("activities", "Activities:"),
    ("accommodations", "Accommodations:"),
    ("restaurants", "Restaurants:"),
    ("safety_tips", "Safety Tips:"),
]

SECTION_LABELS: Dict[str, str] = dict(SECTIONS)

_SECTION_GUIDANCE: Dict[str, str] = {
    "summary": "a concise summary of the recommendation (2-3 sentences)",
    "details": "a detailed explanation of the recommendation",
    "pros": "4-6 advantages of this travel plan, one per line",
    "cons": "4-6 drawbacks of this travel plan, one per line",
    "places": "4-6 places to visit, one per line, with a link when you know one",
    "activities": "4-6 activities to do, one per line, with a link when you know one",
    "accommodations": "4-6 places to stay, one per line, with a link when you know one",
    "restaurants": "4-6 restaurants, one per line, with a link when you know one",
    "safety_tips": "4-6 safety tips relevant to this plan, one per line",
}

SYSTEM_PROMPT = (
    f"You are an expert travel advisor for {DESTINATION}. "
    "You give practical, specific and up-to-date recommendations and always answer "
    "in the exact structure you are asked for."
)

_STRING_LIST = {"type": "array", "items": {"type": "string"}, "description": "4-6 items"}

_ITEM_LIST = {
    "type": "array",
    "description": "4-6 items",
    "items": {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "link": {
                "type": "string",
                "description": "Absolute URI of an official or booking page, or an empty string when unknown",
            },
        },
        "required": ["name", "link"],
        "additionalProperties": False,
    },
}

TRAVEL_PLAN_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {"type": "string"},
        "details": {"type": "string"},
        "prosAndCons": {
            "type": "object",
            "properties": {"pros": _STRING_LIST, "cons": _STRING_LIST},
            "required": ["pros", "cons"],
            "additionalProperties": False,
        },
        "recommendations": {
            "type": "object",
            "properties": {
                "places": _ITEM_LIST,
                "activities": _ITEM_LIST,
                "accommodations": _ITEM_LIST,
                "restaurants": _ITEM_LIST,
            },
            "required": ["places", "activities", "accommodations", "restaurants"],
            "additionalProperties": False,
        },
        "safetytips": _STRING_LIST,
    },
    "required": ["summary", "details", "prosAndCons", "recommendations", "safetytips"],
    "additionalProperties": False,
}


def _region_label(code: str) -> str:
    if code == "all":
        return f"anywhere in {DESTINATION}"
    return region_name(code)


def build_prompt(params: QueryParams) -> str:
    prompt = (
        f"As an expert travel advisor for {DESTINATION}, I need a comprehensive travel plan "
        "based on the following criteria:\n\n"
    )

    if params.query:
        prompt += f"User query: {params.query}\n\n"

    if params.preferences:
        prompt += f"Travel preferences: {', '.join(params.preferences)}\n"

    if params.regions:
        prompt += f"Regions of interest: {', '.join(_region_label(r) for r in params.regions)}\n"

    if params.budget:
        prompt += f"Budget range: {params.budget}\n"

    if params.companions:
        prompt += f"Traveling with: {params.companions}\n"

    sections = "\n".join(f"{label} {_SECTION_GUIDANCE[field]}" for field, label in SECTIONS)

    prompt += f"""
Please provide the travel plan with exactly these sections, in this order.
If you answer in plain text, start each section with its label exactly as written:
{sections}

Return JSON only when possible: a single object matching this schema, no code fences, no explanations.
Every list must contain 4-6 items. Use an empty string for "link" when you do not know a reliable URL.
{json.dumps(TRAVEL_PLAN_SCHEMA, indent=2)}
"""
    return prompt
