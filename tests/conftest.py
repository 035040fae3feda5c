"""Shared fixtures: a throwaway SQLite database and a scripted text generator.

Environment variables are set before any application module is imported so
that the engines and the log directory point at a temporary location.
"""
import json
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="coach-tests-")
os.environ["WRITE_DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "coach-test.db")
os.environ.pop("READ_DATABASE_URL", None)
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")
os.environ["OPENAI_API_KEY"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.exceptions import GenerationError  # noqa: E402
from database import Base, WriteSessionLocal, write_engine  # noqa: E402
from database.deps import get_text_generator  # noqa: E402


def make_meal(name, ingredients):
    return {
        "name": name,
        "ingredients": ingredients,
        "preparation_time": "15 minutes",
        "cooking_method": "roasting",
        "nutritional_focus": ["fiber"],
        "health_benefits": ["steady energy"],
        "cultural_authenticity": "home style",
    }


SAMPLE_PLAN = {
    "condition_focus": ["pcos"],
    "cuisine_style": "Mediterranean",
    "menstrual_phase": "Follicular Phase",
    "cycle_specific_recommendations": {
        "phase": "Follicular Phase",
        "seed_cycling": ["flax seeds", "pumpkin seeds"],
        "hormone_support_foods": ["broccoli"],
        "phase_benefits": ["supports estrogen metabolism"],
    },
    "breakfast": make_meal("Greek Yogurt Bowl", ["greek yogurt", "blueberries", "flax seeds"]),
    "lunch": make_meal("Chickpea Salad", ["chickpeas", "cucumber", "tomato", "olive oil"]),
    "dinner": make_meal("Herb Salmon", ["salmon", "quinoa", "spinach", "oregano"]),
    "snacks": [make_meal("Apple and Almonds", ["apple", "almonds"])],
    "daily_guidelines": {
        "foods_to_emphasize": ["leafy greens"],
        "foods_to_limit": ["refined sugar"],
        "hydration_tips": ["water with lemon"],
        "timing_recommendations": ["eat within an hour of waking"],
    },
}

SAMPLE_SCORES = {
    "nutritional_completeness": 9,
    "variety_score": 8,
    "cultural_authenticity": 7,
    "health_condition_alignment": 9,
    "cycle_phase_precision": 8,
    "accuracy": 8,
    "personalization": 6,
    "integration": 6,
    "relevance": 8,
    "satisfaction": 7,
}


class FakeGenerator:
    """Stands in for `LLMClient`.

    Returns `plan` for meal plan prompts and `scores` for evaluation prompts.
    With `fail=True` every call raises `GenerationError`; `raw` overrides
    the meal plan reply with arbitrary text.
    """

    def __init__(self, plan=None, scores=None, fail=False, raw=None):
        self.plan = plan if plan is not None else SAMPLE_PLAN
        self.scores = scores if scores is not None else SAMPLE_SCORES
        self.fail = fail
        self.raw = raw
        self.prompts = []

    def complete_json(self, prompt, temperature=None, role="system"):
        self.prompts.append(prompt)
        if self.fail:
            raise GenerationError("simulated outage")
        if "Rate on a scale of 1-10" in prompt:
            return json.dumps(self.scores)
        if self.raw is not None:
            return self.raw
        return json.dumps(self.plan)


@pytest.fixture
def sample_plan():
    return json.loads(json.dumps(SAMPLE_PLAN))


@pytest.fixture
def make_generator():
    return FakeGenerator


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def failing_generator():
    return FakeGenerator(fail=True)


@pytest.fixture
def db_session():
    """Fresh schema per test."""
    Base.metadata.drop_all(bind=write_engine)
    Base.metadata.create_all(bind=write_engine)
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def make_client(db_session):
    """Build a `TestClient` whose text generator is the given fake."""
    from main import app

    clients = []

    def _make(generator=None):
        fake = generator or FakeGenerator()
        app.dependency_overrides[get_text_generator] = lambda: fake
        client = TestClient(app, raise_server_exceptions=False)
        clients.append(client)
        return client

    yield _make
    app.dependency_overrides.clear()
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client):
    return make_client()
