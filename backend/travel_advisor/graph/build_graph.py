import logging
from typing import Optional

from langgraph.graph import StateGraph, END
from travel_advisor.graph.state import RunState
from travel_advisor.graph.agents import (
    TRANSPORT_FAILURE_MESSAGE,
    make_research_agent,
    prompt_builder,
    response_interpreter,
)
from travel_advisor.graph.postprocess.fallback import synthesize_plan
from travel_advisor.integrations.openai_client import ResearchClient
from travel_advisor.models.entities import TravelPlan
from travel_advisor.models.results import Failure, ResultEnvelope, Success
from travel_advisor.models.trip_preferences import QueryParams

logger = logging.getLogger(__name__)


def _route_after_research(state: RunState) -> str:
    return "fail" if state.error else "interpret"


def build_graph(research_client: ResearchClient):
    g = StateGraph(RunState)

    g.add_node("prompt_builder", prompt_builder)
    g.add_node("research_agent", make_research_agent(research_client))
    g.add_node("response_interpreter", response_interpreter)

    g.set_entry_point("prompt_builder")
    g.add_edge("prompt_builder", "research_agent")
    g.add_conditional_edges(
        "research_agent",
        _route_after_research,
        {"interpret": "response_interpreter", "fail": END},
    )
    g.add_edge("response_interpreter", END)

    return g.compile()


async def submit_query(
    params: QueryParams,
    research_client: ResearchClient,
    graph=None,
) -> ResultEnvelope:
    """
    Run one research request end to end.

    Transport and truncation failures come back as ``Failure``; every other
    path yields a ``Success`` carrying a complete plan.
    """
    graph = graph or build_graph(research_client)
    try:
        result = await graph.ainvoke(RunState(params=params))
    except Exception:
        logger.exception("Research pipeline crashed")
        return Failure(error=TRANSPORT_FAILURE_MESSAGE)

    error: Optional[str] = result.get("error")
    if error:
        return Failure(error=error)

    plan = result.get("plan")
    if plan is None:
        logger.warning("Pipeline finished without a plan; synthesizing one")
        plan = synthesize_plan(params)
    elif not isinstance(plan, TravelPlan):
        plan = TravelPlan.model_validate(plan)

    logger.info("Research complete via %s", result.get("strategy"))
    return Success(data=plan)
