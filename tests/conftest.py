"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from accessguide.content.models import GuidanceEntry  # noqa: E402
from accessguide.content.store import ContentStore  # noqa: E402
from accessguide.delivery.analytics import AnalyticsSink  # noqa: E402
from accessguide.delivery.timers import ManualTimers  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


def make_entry_dict(question_id: str, **overrides) -> dict:
    """Minimal valid entry dictionary; overrides replace top-level fields."""
    data = {
        "question_id": question_id,
        "module_code": question_id.split("-")[0],
        "module_group": "getting-in",
        "category": "physical-access",
        "title": f"Guidance {question_id}",
        "summary": f"Summary for {question_id}",
        "why_it_matters": {"text": "It matters."},
    }
    data.update(overrides)
    return data


def make_entry(question_id: str, **overrides) -> GuidanceEntry:
    return GuidanceEntry.from_dict(make_entry_dict(question_id, **overrides))


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def entry_factory():
    """Build GuidanceEntry objects from a question id and field overrides."""
    return make_entry


@pytest.fixture
def entry_dict_factory():
    """Build raw entry dictionaries as they appear in content files."""
    return make_entry_dict


@pytest.fixture
def parking_entry_dict():
    """A realistic entry with examples, tips, and a dangling related link."""
    return make_entry_dict(
        "2.1-F-1",
        title="Accessible Parking",
        summary="Wider parking spaces close to the entrance.",
        keywords=["parking", "car park", "ACROD"],
        tips=[
            {"icon": "Lightbulb", "text": "Light the path"},
            {"icon": "Maximize", "text": "Make spaces wide", "priority": 2},
            {"icon": "ParkingSquare", "text": "Keep spaces close", "priority": 1},
        ],
        examples=[
            {"audience": "restaurant-cafe", "scenario": "Far away spaces", "solution": "Moved them"},
            {"audience": "retail", "scenario": "Misused space", "solution": "Added signage"},
            {"audience": "general", "scenario": "No signage", "solution": "Added a bollard sign"},
        ],
        related_questions=[
            {"question_id": "2.2-F-1", "display_text": "Accessible entrance?", "relationship": "Connects"},
            {"question_id": "1.1-F-8", "display_text": "Transport info?", "relationship": "Context"},
        ],
    )


@pytest.fixture
def sample_entries(parking_entry_dict):
    """Four entries across two modules and two categories."""
    return [
        GuidanceEntry.from_dict(parking_entry_dict),
        make_entry(
            "2.2-F-1",
            title="Accessible Entrance",
            summary="Step-free doorways.",
            keywords=["entrance", "ramp"],
            related_questions=[{"question_id": "2.1-F-1", "display_text": "Parking?"}],
        ),
        make_entry(
            "3.2-D-8",
            module_group="during-visit",
            title="Layout, Transfer Space and Grab Rails",
            summary="Transfer space beside the toilet.",
            keywords=["grab rails", "backrest"],
            question_text="Is there an entrance ramp to the toilet block?",
            covered_question_ids=["3.2-D-9", "3.2-D-13"],
        ),
        make_entry(
            "4.1-F-1",
            module_group="service-support",
            category="customer-service",
            title="Disability Awareness Training",
            summary="Staff who know how to help.",
            keywords=["training"],
        ),
    ]


@pytest.fixture
def store(sample_entries):
    """A built ContentStore over sample_entries."""
    return ContentStore.build(sample_entries)


@pytest.fixture
def timers():
    """Virtual clock for deterministic session timing."""
    return ManualTimers()


@pytest.fixture
def analytics():
    """Mock analytics sink; call order is visible in method_calls."""
    return Mock(spec=AnalyticsSink)
