from pydantic import BaseModel, ConfigDict
from typing import Dict, Optional, Literal, Tuple, get_args

Preference = Literal["adventure", "beach", "cultural", "luxury", "budget", "family", "solo"]
Region = Literal["santo-domingo", "punta-cana", "samana", "puerto-plata", "la-romana", "all"]

# Canonical ordering for the tag sets; QueryParams always stores tags in this order
PREFERENCES: Tuple[str, ...] = get_args(Preference)
REGIONS: Tuple[str, ...] = get_args(Region)

DESTINATION = "the Dominican Republic"

REGION_NAMES: Dict[str, str] = {
    "santo-domingo": "Santo Domingo",
    "punta-cana": "Punta Cana",
    "samana": "Samaná",
    "puerto-plata": "Puerto Plata",
    "la-romana": "La Romana",
}


def region_name(code: str) -> str:
    return REGION_NAMES.get(code, code)


class QueryParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    preferences: Tuple[Preference, ...] = ()
    regions: Tuple[Region, ...] = ()
    budget: Optional[str] = None
    companions: Optional[str] = None

    def is_empty(self) -> bool:
        """True when there is nothing at all to research."""
        return not (self.query or self.preferences or self.regions or self.budget or self.companions)
