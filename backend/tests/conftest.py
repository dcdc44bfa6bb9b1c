import asyncio
import json
from types import SimpleNamespace

import pytest

from travel_advisor.integrations.openai_client import ResearchClient


def make_completion(content, finish_reason="stop", refusal=None, model="o3-mini"):
    """Shape of an openai ChatCompletion, as far as ResearchClient reads it."""
    message = SimpleNamespace(content=content, refusal=refusal)
    usage = SimpleNamespace(prompt_tokens=120, completion_tokens=480)
    return SimpleNamespace(
        choices=[SimpleNamespace(message=message, finish_reason=finish_reason)],
        usage=usage,
        model=model,
    )


class FakeCompletions:
    def __init__(self, response=None, error=None, delay=0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


class FakeOpenAI:
    def __init__(self, completions: FakeCompletions):
        self.chat = SimpleNamespace(completions=completions)


SAMPLE_PLAN = {
    "summary": "Punta Cana suits a relaxed family beach week.",
    "details": "Stay in Bávaro for calm water and easy excursions.",
    "prosAndCons": {
        "pros": ["Calm beaches", "Family resorts", "Direct flights", "Safe tourist zones"],
        "cons": ["Resort bubble", "Extra excursion costs", "Beach vendors", "Humid summers"],
    },
    "recommendations": {
        "places": [
            {"name": "Bávaro Beach", "link": ""},
            {"name": "Isla Saona", "link": "https://www.godominicanrepublic.com/"},
            {"name": "Hoyo Azul", "link": ""},
            {"name": "Indigenous Eyes Park", "link": ""},
        ],
        "activities": [
            {"name": "Catamaran trip", "link": ""},
            {"name": "Snorkeling", "link": ""},
            {"name": "Chocolate workshop", "link": ""},
            {"name": "Horseback riding", "link": ""},
        ],
        "accommodations": [
            {"name": "Barceló Bávaro Palace", "link": ""},
            {"name": "Dreams Punta Cana", "link": ""},
            {"name": "Grand Sirenis", "link": ""},
            {"name": "Nickelodeon Hotels & Resorts", "link": ""},
        ],
        "restaurants": [
            {"name": "Jellyfish", "link": ""},
            {"name": "Citrus", "link": ""},
            {"name": "La Yola", "link": ""},
            {"name": "Chic Cabaret", "link": ""},
        ],
    },
    "safetytips": ["Stay in resort areas at night", "Use resort transport", "Use room safes", "Wear reef-safe sunscreen"],
}


@pytest.fixture
def sample_plan():
    return json.loads(json.dumps(SAMPLE_PLAN))


@pytest.fixture
def make_client():
    """Build a ResearchClient around a fake completions endpoint."""

    def _make(content=None, *, finish_reason="stop", refusal=None, error=None, delay=0.0, timeout=5.0, **kwargs):
        completions = FakeCompletions(
            response=make_completion(content, finish_reason=finish_reason, refusal=refusal),
            error=error,
            delay=delay,
        )
        client = ResearchClient(FakeOpenAI(completions), timeout=timeout, **kwargs)
        return client, completions

    return _make
