from typing import List, Optional
from pydantic import BaseModel, Field
from travel_advisor.integrations.openai_client import RawServiceOutput
from travel_advisor.models.entities import TravelPlan
from travel_advisor.models.trip_preferences import QueryParams


class RunState(BaseModel):
    params: QueryParams
    prompt: str = ""
    raw: Optional[RawServiceOutput] = None
    plan: Optional[TravelPlan] = None
    strategy: Optional[str] = None
    error: Optional[str] = None
    logs: List[dict] = Field(default_factory=list)
