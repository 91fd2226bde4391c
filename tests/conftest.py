"""
Shared fixtures: an app wired to in-memory SQLite and a scripted fake LLM.
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.db.models.lead import Lead
from app.db.models.masterclass import Masterclass
from app.deps import get_llm
from app.main import create_app
from app.settings import Settings
from fakes import FakeLLM


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        LLM_PROVIDER="groq",
        GROQ_API_KEY=None,
        log_level="DEBUG",
    )


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def app(settings, fake_llm):
    app = create_app(settings)
    app.dependency_overrides[get_llm] = lambda: fake_llm
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session_factory(client):
    return client.app.state.session_factory


@pytest.fixture
def make_lead(session_factory):
    def _make(email="ada@example.com", **overrides):
        values = {
            "name": "Ada",
            "email": email,
            "job_role": "Student",
            "experience_level": "Student",
            "career_goals": "Become an ML engineer",
            "preferred_tech_stack": ["Python"],
        }
        values.update(overrides)
        with session_factory() as db:
            lead = Lead(**values)
            db.add(lead)
            db.commit()
            return lead.id

    return _make


@pytest.fixture
def make_masterclass(session_factory):
    def _make(title="Intro to MLOps", days_ahead=3, **overrides):
        values = {
            "title": title,
            "description": "Live session",
            "instructor": "Grace",
            "scheduled_date": datetime.now(timezone.utc) + timedelta(days=days_ahead),
        }
        values.update(overrides)
        with session_factory() as db:
            mc = Masterclass(**values)
            db.add(mc)
            db.commit()
            return mc.id

    return _make
