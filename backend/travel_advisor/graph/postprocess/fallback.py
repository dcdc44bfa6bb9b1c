"""Deterministic travel plan used when the completion service gives nothing usable.

Everything here is a pure function of ``QueryParams``: the same selections
always produce the same plan, with no network access required.
"""

from typing import Dict, List

from travel_advisor.models.entities import ProsAndCons, RecommendationItem, Recommendations, TravelPlan
from travel_advisor.models.trip_preferences import DESTINATION, QueryParams, region_name

PREFERENCE_ADJECTIVES: Dict[str, str] = {
    "adventure": "adventure-filled",
    "beach": "beach",
    "cultural": "culturally immersive",
    "luxury": "luxurious",
    "budget": "budget-friendly",
    "family": "family",
    "solo": "solo",
}

GENERIC_SUMMARY = (
    f"Here is a travel plan for {DESTINATION} covering where to go, what to do, "
    "where to stay and where to eat."
)
GENERIC_DETAILS = (
    f"{DESTINATION} combines white-sand beaches, colonial history and mountain scenery. "
    "Review the recommendations below and adjust them to your dates, budget and travel style."
)

DEFAULT_PROS: List[str] = [
    "Warm climate year-round with temperatures between 75-85°F",
    "Wide range of beaches, from resort strands to secluded coves",
    "Well-developed tourism infrastructure in the main regions",
    "Rich cultural experiences and friendly locals",
]

DEFAULT_CONS: List[str] = [
    "Peak season (December-April) can be crowded and more expensive",
    "Some areas require extra safety precautions, especially at night",
    "Language barrier in less touristy areas (Spanish predominant)",
    "Persistent vendors at popular tourist spots",
]

DEFAULT_PLACES: List[str] = [
    "Colonial Zone in Santo Domingo (UNESCO World Heritage Site)",
    "Playa Rincón in Samaná (consistently rated among the world's best beaches)",
    "Los Haitises National Park (unique limestone karst landscape)",
    "Isla Saona (pristine island paradise)",
    "27 Waterfalls of Damajagua (natural water slides and pools)",
]

DEFAULT_ACTIVITIES: List[str] = [
    "Whale watching in Samaná Bay (January-March)",
    "Ziplining through the jungle canopy in Puerto Plata",
    "Learning merengue and bachata dancing with locals",
    "Exploring underwater caves and coral reefs",
    "Sampling local rum and cigar production",
]

DEFAULT_ACCOMMODATIONS: List[str] = [
    "Casas del XVI (boutique hotel in restored colonial houses)",
    "Eden Roc Cap Cana (luxury seaside resort)",
    "Tubagua Eco Lodge (sustainable mountain retreat)",
    "Billini Hotel (historic luxury in Santo Domingo)",
    "Tortuga Bay Puntacana Resort (exclusive beachfront villas)",
]

DEFAULT_RESTAURANTS: List[str] = [
    "La Yola (seafood restaurant on stilts over the water)",
    "Mesón de Bari (authentic Dominican cuisine in a colonial setting)",
    "Travesias (innovative fusion of local ingredients)",
    "El Conuco (traditional food with folklore show)",
    "Pat'e Palo (European brasserie in America's first tavern)",
]

DEFAULT_SAFETY_TIPS: List[str] = [
    "Register with your embassy before traveling",
    "Use registered taxis or reputable ride-sharing services",
    "Keep valuables secured in hotel safes",
    "Stay hydrated and use reef-safe sunscreen",
    "Be cautious when withdrawing money from ATMs, especially at night",
    "Learn basic Spanish phrases for emergencies",
]


def default_items(names: List[str]) -> List[RecommendationItem]:
    return [RecommendationItem(name=n) for n in names]


def _region_text(params: QueryParams) -> str:
    if not params.regions or "all" in params.regions:
        return DESTINATION
    return " and ".join(region_name(r) for r in params.regions)


def _travel_type(params: QueryParams) -> str:
    if not params.preferences:
        return "vacation"
    return " and ".join(PREFERENCE_ADJECTIVES.get(p, p) for p in params.preferences) + " vacation"


def synthesize_plan(params: QueryParams) -> TravelPlan:
    region = _region_text(params)
    budget = params.budget.lower() if params.budget else "mid-range"
    travel_type = _travel_type(params)
    companions = params.companions.lower() if params.companions else "travelers"

    return TravelPlan(
        summary=(
            f"Discover the perfect {travel_type} in {region} with a {budget} budget, "
            f"ideal for {companions}."
        ),
        details=(
            f"{region} offers an exceptional destination for a {travel_type}. "
            "With its stunning natural beauty, rich history, and vibrant culture, you'll find "
            "plenty to enjoy regardless of your travel style. "
            f"The {budget} price point allows for comfortable accommodations and authentic "
            "experiences without breaking the bank. "
            f"For {companions}, this destination provides the right balance of activities, "
            "relaxation, and local immersion."
        ),
        pros_and_cons=ProsAndCons(
            pros=[
                "Perfect climate year-round with temperatures between 75-85°F",
                f"Exceptional value for {budget} travelers",
                f"Wide variety of {travel_type} options",
                f"Well-developed tourism infrastructure in {region}",
                "Rich cultural experiences and friendly locals",
            ],
            cons=[
                "Peak season (December-April) can be crowded and more expensive",
                "Some areas require extra safety precautions, especially at night",
                "Language barrier in less touristy areas (Spanish predominant)",
                "Occasional power outages in certain regions",
                "Persistent vendors at popular tourist spots",
            ],
        ),
        recommendations=Recommendations(
            places=default_items(DEFAULT_PLACES),
            activities=default_items(DEFAULT_ACTIVITIES),
            accommodations=default_items(DEFAULT_ACCOMMODATIONS),
            restaurants=default_items(DEFAULT_RESTAURANTS),
        ),
        safety_tips=list(DEFAULT_SAFETY_TIPS),
    )
