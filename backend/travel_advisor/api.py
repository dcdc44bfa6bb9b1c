from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from typing import List, Optional, Union
from pydantic import BaseModel
from travel_advisor.config import Settings
from travel_advisor.graph.normalize import normalize_params
from travel_advisor.integrations.exceptions import IntegrationError
from travel_advisor.integrations.openai_client import ResearchClient
from travel_advisor.models.entities import TravelPlan
from travel_advisor.models.results import ResultEnvelope
from travel_advisor.session import SessionBusyError, TravelSession
import logging

settings = Settings.from_env()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Dominican Republic Travel Advisor API",
    description="Structured travel recommendations powered by OpenAI reasoning models",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.settings = settings
app.state.session = TravelSession()
app.state.research_client = None


def get_session(request: Request) -> TravelSession:
    return request.app.state.session


def get_research_client(request: Request) -> ResearchClient:
    """Build the completion client on first use and reuse it afterwards."""
    client = request.app.state.research_client
    if client is None:
        try:
            client = ResearchClient.from_settings(request.app.state.settings)
        except IntegrationError as e:
            logger.error(f"Research client unavailable: {e}")
            raise HTTPException(status_code=503, detail=str(e))
        request.app.state.research_client = client
    return client


Tags = Union[List[Optional[str]], str, None]


class ResearchRequest(BaseModel):
    query: Optional[str] = None
    preferences: Tags = None
    regions: Tags = None
    budget: Optional[str] = None
    companions: Optional[str] = None


@app.get("/")
def root():
    return {
        "message": "Dominican Republic Travel Advisor API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/health",
            "research": "/research",
            "current_response": "/response",
            "itineraries": "/itineraries",
            "docs": "/docs"
        }
    }


@app.get("/health")
def health():
    return {"status": "healthy", "service": "Travel Advisor Backend"}


@app.post("/research", response_model=ResultEnvelope)
async def research(
    request: ResearchRequest,
    session: TravelSession = Depends(get_session),
    client: ResearchClient = Depends(get_research_client),
):
    """
    Research a travel plan from a free-form query and preference selections.

    - **query**: free-text question (may be empty when selections are given)
    - **preferences**: any of adventure, beach, cultural, luxury, budget, family, solo
    - **regions**: any of santo-domingo, punta-cana, samana, puerto-plata, la-romana, all
    - **budget**: budget range, e.g. "mid-range"
    - **companions**: who is traveling, e.g. "family"

    Returns ``{"success": true, "data": {...}}`` or ``{"success": false, "error": "..."}``.
    """
    params = normalize_params(
        query=request.query,
        preferences=request.preferences,
        regions=request.regions,
        budget=request.budget,
        companions=request.companions,
    )
    if params.is_empty():
        raise HTTPException(status_code=400, detail="Enter a query or select at least one preference")

    logger.info(f"Research requested: query={params.query[:50]!r} preferences={list(params.preferences)} regions={list(params.regions)}")
    try:
        return await session.submit(params, client)
    except SessionBusyError as e:
        raise HTTPException(status_code=409, detail=str(e))


@app.get("/response", response_model=TravelPlan)
def current_response(session: TravelSession = Depends(get_session)):
    if session.current_response is None:
        raise HTTPException(status_code=404, detail="No travel plan yet")
    return session.current_response


@app.delete("/response")
def clear_response(session: TravelSession = Depends(get_session)):
    session.clear_response()
    return {"status": "cleared"}


@app.get("/itineraries", response_model=List[TravelPlan])
def list_itineraries(session: TravelSession = Depends(get_session)):
    return session.saved_itineraries


@app.post("/itineraries", response_model=TravelPlan, status_code=201)
def save_itinerary(session: TravelSession = Depends(get_session)):
    saved = session.save_current_response()
    if saved is None:
        raise HTTPException(status_code=404, detail="No travel plan to save")
    return saved
