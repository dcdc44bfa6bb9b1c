import logging
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ValidationError

from travel_advisor.graph.postprocess.fallback import (
    DEFAULT_ACCOMMODATIONS,
    DEFAULT_ACTIVITIES,
    DEFAULT_CONS,
    DEFAULT_PLACES,
    DEFAULT_PROS,
    DEFAULT_RESTAURANTS,
    DEFAULT_SAFETY_TIPS,
    GENERIC_DETAILS,
    GENERIC_SUMMARY,
    default_items,
    synthesize_plan,
)
from travel_advisor.graph.prompts import SECTIONS
from travel_advisor.graph.utils import extract_section, find_json_object, split_list_items, split_name_and_link
from travel_advisor.integrations.openai_client import RawServiceOutput
from travel_advisor.models.entities import ProsAndCons, RecommendationItem, Recommendations, TravelPlan
from travel_advisor.models.trip_preferences import QueryParams

logger = logging.getLogger(__name__)

Strategy = Literal["structured", "sections", "synthesized"]


class InterpretationResult(BaseModel):
    plan: TravelPlan
    strategy: Strategy


def _or_default(values: List[str], default: List[str]) -> List[str]:
    return list(values) if values else list(default)


def _items_or_default(items: List[RecommendationItem], default: List[str]) -> List[RecommendationItem]:
    return list(items) if items else default_items(default)


def fill_defaults(plan: TravelPlan) -> TravelPlan:
    """Replace every empty list in ``plan`` with its curated default."""
    recs = plan.recommendations
    return TravelPlan(
        summary=plan.summary if plan.summary.strip() else GENERIC_SUMMARY,
        details=plan.details if plan.details.strip() else GENERIC_DETAILS,
        pros_and_cons=ProsAndCons(
            pros=_or_default(plan.pros_and_cons.pros, DEFAULT_PROS),
            cons=_or_default(plan.pros_and_cons.cons, DEFAULT_CONS),
        ),
        recommendations=Recommendations(
            places=_items_or_default(recs.places, DEFAULT_PLACES),
            activities=_items_or_default(recs.activities, DEFAULT_ACTIVITIES),
            accommodations=_items_or_default(recs.accommodations, DEFAULT_ACCOMMODATIONS),
            restaurants=_items_or_default(recs.restaurants, DEFAULT_RESTAURANTS),
        ),
        safety_tips=_or_default(plan.safety_tips, DEFAULT_SAFETY_TIPS),
    )


def parse_structured(content: Optional[str]) -> Optional[TravelPlan]:
    data = find_json_object(content)
    if data is None:
        logger.info("No JSON object in completion output")
        return None
    try:
        plan = TravelPlan.model_validate(data)
    except ValidationError as e:
        logger.warning("Structured output does not match the travel plan shape: %d errors", e.error_count())
        return None
    return fill_defaults(plan)


def extract_sections(text: str) -> Dict[str, Optional[str]]:
    """Raw text for every section label; None where the label is missing."""
    labels = [label for _, label in SECTIONS]
    return {
        field: extract_section(text, label, labels[i + 1:])
        for i, (field, label) in enumerate(SECTIONS)
    }


def _recommendation_items(raw: Optional[str]) -> List[RecommendationItem]:
    items = []
    for line in split_list_items(raw):
        name, link = split_name_and_link(line)
        items.append(RecommendationItem(name=name, link=link))
    return items


def interpret_text(text: Optional[str]) -> Optional[TravelPlan]:
    """
    Build a plan from prose that uses the section labels.

    Returns None when no section carries any text; otherwise every field is
    filled, missing ones from their defaults.
    """
    if not text:
        return None
    sections = extract_sections(text)
    found = [field for field, body in sections.items() if body]
    if not found:
        return None

    missing = [field for field, _ in SECTIONS if not sections[field]]
    if missing:
        logger.info("Sections without content, using defaults: %s", ", ".join(missing))

    return fill_defaults(TravelPlan(
        summary=sections["summary"] or GENERIC_SUMMARY,
        details=sections["details"] or GENERIC_DETAILS,
        pros_and_cons=ProsAndCons(
            pros=split_list_items(sections["pros"]),
            cons=split_list_items(sections["cons"]),
        ),
        recommendations=Recommendations(
            places=_recommendation_items(sections["places"]),
            activities=_recommendation_items(sections["activities"]),
            accommodations=_recommendation_items(sections["accommodations"]),
            restaurants=_recommendation_items(sections["restaurants"]),
        ),
        safety_tips=split_list_items(sections["safety_tips"]),
    ))


def interpret_response(raw: RawServiceOutput, params: QueryParams) -> InterpretationResult:
    """
    Reduce completion output to a TravelPlan.

    Tries, in order: the JSON body, the labelled text sections, and finally
    the deterministic plan for ``params``. Never raises.
    """
    try:
        if raw.has_text:
            plan = parse_structured(raw.content)
            if plan is not None:
                logger.info("Interpreted completion as structured JSON")
                return InterpretationResult(plan=plan, strategy="structured")

            plan = interpret_text(raw.content)
            if plan is not None:
                logger.info("Interpreted completion from section markers")
                return InterpretationResult(plan=plan, strategy="sections")
        elif raw.refusal:
            logger.warning("Completion service declined the request: %s", raw.refusal)
    except Exception:
        logger.exception("Unexpected error interpreting completion output")

    logger.warning("No usable completion content; synthesizing plan from preferences")
    return InterpretationResult(plan=synthesize_plan(params), strategy="synthesized")
