"""In-memory state behind the chat UI.

Holds the latest selections, the current response slot, the busy flag and
the append-only list of saved itineraries. Nothing is persisted.
"""

import logging
from typing import List, Optional

from travel_advisor.graph.build_graph import build_graph, submit_query
from travel_advisor.integrations.openai_client import ResearchClient
from travel_advisor.models.entities import TravelPlan
from travel_advisor.models.results import ResultEnvelope, Success
from travel_advisor.models.trip_preferences import QueryParams

logger = logging.getLogger(__name__)


class SessionBusyError(RuntimeError):
    """Raised when a query is submitted while another one is in flight."""


class TravelSession:
    def __init__(self) -> None:
        self.params: Optional[QueryParams] = None
        self.current_response: Optional[TravelPlan] = None
        self.is_querying: bool = False
        self.saved_itineraries: List[TravelPlan] = []
        self._graph = None
        self._graph_client: Optional[ResearchClient] = None

    def _graph_for(self, client: ResearchClient):
        if self._graph is None or self._graph_client is not client:
            self._graph = build_graph(client)
            self._graph_client = client
        return self._graph

    async def submit(self, params: QueryParams, client: ResearchClient) -> ResultEnvelope:
        if self.is_querying:
            raise SessionBusyError("A research request is already in progress")

        self.is_querying = True
        self.params = params
        try:
            envelope = await submit_query(params, client, graph=self._graph_for(client))
        finally:
            self.is_querying = False

        if isinstance(envelope, Success):
            self.current_response = envelope.data
        else:
            logger.info("Research failed: %s", envelope.error)
        return envelope

    def clear_response(self) -> None:
        self.current_response = None

    def save_current_response(self) -> Optional[TravelPlan]:
        """Copy the current response into saved itineraries; None if there is nothing to save."""
        if self.current_response is None:
            return None
        saved = self.current_response.model_copy(deep=True)
        self.saved_itineraries.append(saved)
        logger.info("Saved itinerary #%d", len(self.saved_itineraries))
        return saved
