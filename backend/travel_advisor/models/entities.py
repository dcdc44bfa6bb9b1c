# travel_advisor/models/entities.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from typing import List


class RecommendationItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    link: str = ""  # URI, empty when unknown

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_string(cls, data):
        # older responses list recommendations as bare names
        if isinstance(data, str):
            return {"name": data}
        # unknown links arrive as null when the schema is not enforced
        if isinstance(data, dict) and data.get("link") is None:
            return {**data, "link": ""}
        return data


class ProsAndCons(BaseModel):
    model_config = ConfigDict(frozen=True)

    pros: List[str]
    cons: List[str]


class Recommendations(BaseModel):
    model_config = ConfigDict(frozen=True)

    places: List[RecommendationItem]
    activities: List[RecommendationItem]
    accommodations: List[RecommendationItem]
    restaurants: List[RecommendationItem]


class TravelPlan(BaseModel):
    """Canonical recommendation record rendered by the UI.

    Field aliases follow the completion-service schema (``prosAndCons``,
    ``safetytips``); ``safetyTips`` is accepted on input too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: str
    details: str
    pros_and_cons: ProsAndCons = Field(alias="prosAndCons")
    recommendations: Recommendations
    safety_tips: List[str] = Field(
        alias="safetytips",
        validation_alias=AliasChoices("safetytips", "safetyTips", "safety_tips"),
    )
