"""Pytest configuration and shared fixtures."""

import os

import pytest

from festsearch.core.models import Contributor, Event, Venue


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Isolate environment variables for each test.

    This prevents test pollution where one test's environment
    changes affect other tests.
    """
    original_env = os.environ.copy()
    monkeypatch.delenv("FESTSEARCH_FEED", raising=False)
    monkeypatch.delenv("FESTSEARCH_CACHE_TTL", raising=False)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def event_factory():
    """Build events with only the fields a test cares about."""

    def make(event_id: str, name: str | None = None, **kwargs) -> Event:
        return Event(id=event_id, name=name, **kwargs)

    return make


@pytest.fixture
def hilton() -> Venue:
    return Venue(id="v1", name="Hilton Salon D", lat=30.26, lon=-97.74)


@pytest.fixture
def sample_events(hilton) -> list[Event]:
    """Small schedule spanning two dates plus an unscheduled event."""
    return [
        Event(
            id="E1",
            name="AI and the Future",
            category="Panel",
            date="2026-03-14",
            start_time="2026-03-14T10:00:00-05:00",
        ),
        Event(
            id="E2",
            name="Building Developer Tools with LLMs",
            category="Workshop",
            event_type="session",
            date="2026-03-14",
            start_time="2026-03-14T09:00:00-05:00",
            venue=hilton,
            contributors=(Contributor(name="Ada Lovelace", type="speaker"),),
        ),
        Event(
            id="E3",
            name="Indie Rock Showcase",
            category="Rock",
            event_type="showcase",
            date="2026-03-15",
            start_time="2026-03-15T21:00:00-05:00",
            venue=Venue(id="v2", name="Stubb's"),
            contributors=(Contributor(name="The Agents", type="artist"),),
        ),
        Event(
            id="E4",
            name="Agentic Workflows for Software Engineers",
            category="Panel",
            event_type="panel",
            date="2026-03-15",
            start_time="2026-03-15T13:00:00-05:00",
            venue=hilton,
            contributors=(
                Contributor(name="Grace Hopper", type="speaker"),
                Contributor(name="Alan Turing", type="moderator"),
            ),
        ),
        Event(
            id="E5",
            name="Film Premiere",
            category="Documentary Feature",
            event_type="screening",
            date="unknown",
        ),
    ]
