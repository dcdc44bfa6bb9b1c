import json
import logging
from typing import Iterable, List, Optional, Sequence, Union

from travel_advisor.models.trip_preferences import PREFERENCES, REGIONS, QueryParams

logger = logging.getLogger(__name__)

_PLACEHOLDERS = {"", "none", "null", "undefined"}

RawTags = Union[str, Iterable[Optional[str]], None]


def _clean_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if text.lower() in _PLACEHOLDERS:
        return None
    return text


def _split_tags(raw: RawTags) -> List[str]:
    """Accept a list, a JSON array string or a comma-separated string."""
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            # fallback: comma-separated
            return raw.split(",")
        if isinstance(parsed, list):
            return [x for x in parsed if isinstance(x, str)]
        return [parsed] if isinstance(parsed, str) else [raw]
    return [x for x in raw if x is not None]


def _canonical_tags(raw: RawTags, allowed: Sequence[str], kind: str, slug: bool = False) -> tuple:
    seen = set()
    for tag in _split_tags(raw):
        tag = _clean_text(tag)
        if tag is None:
            continue
        tag = tag.lower()
        if slug:
            tag = "-".join(tag.replace("_", " ").split())
        if tag not in allowed:
            logger.warning("Ignoring unknown %s %r", kind, tag)
            continue
        seen.add(tag)
    return tuple(t for t in allowed if t in seen)


def normalize_params(
    query: Optional[str] = None,
    preferences: RawTags = None,
    regions: RawTags = None,
    budget: Optional[str] = None,
    companions: Optional[str] = None,
) -> QueryParams:
    """
    Turn raw UI selections into canonical QueryParams.

    Null and placeholder entries are dropped, tags are de-duplicated and
    kept in canonical order, unset optional fields become None.
    """
    return QueryParams(
        query=(query or "").strip(),
        preferences=_canonical_tags(preferences, PREFERENCES, "preference"),
        regions=_canonical_tags(regions, REGIONS, "region", slug=True),
        budget=_clean_text(budget),
        companions=_clean_text(companions),
    )
