from pydantic import BaseModel
from typing import Literal, Union

from travel_advisor.models.entities import TravelPlan


class Success(BaseModel):
    success: Literal[True] = True
    data: TravelPlan


class Failure(BaseModel):
    success: Literal[False] = False
    error: str


ResultEnvelope = Union[Success, Failure]
