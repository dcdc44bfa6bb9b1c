import logging
import time

from .state import RunState
from travel_advisor.graph.prompts import TRAVEL_PLAN_SCHEMA, build_prompt
from travel_advisor.graph.postprocess.interpret import interpret_response
from travel_advisor.integrations.exceptions import IncompleteOutputError, TransportError
from travel_advisor.integrations.openai_client import RawServiceOutput, ResearchClient

logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_MESSAGE = "Failed to perform research. Please try again later."
INCOMPLETE_FAILURE_MESSAGE = (
    "The request was too complex to complete. "
    "Try narrowing your query or selecting fewer options."
)


def ensure_usable(raw: RawServiceOutput) -> RawServiceOutput:
    """Raise IncompleteOutputError when the output was cut off before any text arrived."""
    if raw.incomplete and not raw.has_text:
        raise IncompleteOutputError(f"Completion stopped early ({raw.finish_reason}) with no content")
    return raw


def prompt_builder(state: RunState) -> dict:
    prompt = build_prompt(state.params)
    logger.info("Built research prompt (%d chars)", len(prompt))
    return {
        "prompt": prompt,
        "logs": state.logs + [{
            "stage": "Prompt Built",
            "message": f"Prompt ready with {len(state.params.preferences)} preferences and {len(state.params.regions)} regions",
            "chars": len(prompt),
        }],
    }


def make_research_agent(client: ResearchClient):
    """Bind the completion client into a graph node."""

    async def research_agent(state: RunState) -> dict:
        start = time.perf_counter()
        try:
            raw = ensure_usable(await client.call(state.prompt, TRAVEL_PLAN_SCHEMA))
        except TransportError as e:
            logger.error(f"Research call failed: {e}")
            return {
                "error": TRANSPORT_FAILURE_MESSAGE,
                "logs": state.logs + [{"stage": "Research Failed", "message": str(e)}],
            }
        except IncompleteOutputError as e:
            logger.warning(f"Research output unusable: {e}")
            return {
                "error": INCOMPLETE_FAILURE_MESSAGE,
                "logs": state.logs + [{"stage": "Research Incomplete", "message": str(e)}],
            }

        duration = time.perf_counter() - start
        return {
            "raw": raw,
            "logs": state.logs + [{
                "stage": "Research Received",
                "message": f"Completion received in {duration:.2f}s",
                "seconds": round(duration, 2),
                "finish_reason": raw.finish_reason,
                "incomplete": raw.incomplete,
            }],
        }

    return research_agent


def response_interpreter(state: RunState) -> dict:
    result = interpret_response(state.raw or RawServiceOutput(), state.params)
    return {
        "plan": result.plan,
        "strategy": result.strategy,
        "logs": state.logs + [{
            "stage": "Plan Interpreted",
            "message": f"Travel plan built via {result.strategy}",
            "strategy": result.strategy,
        }],
    }
