"""Minimal live smoke test for the research pipeline.

Needs OPENAI_API_KEY. Run locally: `python backend/tests/smoke_plan.py`
"""

import asyncio
import json

from travel_advisor.config import Settings
from travel_advisor.graph.build_graph import submit_query
from travel_advisor.graph.normalize import normalize_params
from travel_advisor.integrations.openai_client import ResearchClient


async def main():
    params = normalize_params(
        query="Where should we stay for a relaxed week by the beach?",
        preferences=["family", "beach"],
        regions=["punta-cana"],
        budget="mid-range",
        companions="family",
    )
    client = ResearchClient.from_settings(Settings.from_env())
    envelope = await submit_query(params, client)
    if not envelope.success:
        print("Research failed:", envelope.error)
        return
    plan = envelope.data
    print("Summary:", plan.summary)
    print("Places:", len(plan.recommendations.places))
    print("Activities:", len(plan.recommendations.activities))
    print("Accommodations:", len(plan.recommendations.accommodations))
    print("Restaurants:", len(plan.recommendations.restaurants))
    print(json.dumps(plan.model_dump(by_alias=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    asyncio.run(main())
