"""Pytest fixtures for opportunity-finder tests."""

import copy
import json
from typing import Any, Optional

import pytest

from opportunity_finder.generation.backends import GenerationBackend
from opportunity_finder.generation.client import GenerationClient

SAMPLE_RECORD: dict[str, Any] = {
    "sector": "Hostelería",
    "businessType": "Cafetería de especialidad",
    "managerEmail": "ana.gomez@cafe.es",
    "urgentNeed": "Gestionar reseñas y pedidos online sin personal dedicado.",
    "aiSolutionName": "BaristaBot",
    "aiSolutionDescription": "Asistente que responde reseñas y toma pedidos por chat.",
    "appCreationPrompt": "Construye un asistente conversacional con acceso al menú...",
    "proposalEmail": {
        "subject": "Propuesta de IA para optimizar sus reseñas en Cafetería de especialidad",
        "body": "Estimada Ana,\n\nHemos detectado...\n\nAtentamente,\nMoris Polanco, CEO",
    },
    "acceptanceProbability": {
        "rating": "Alta",
        "justification": "Alto ticket medio y clientela digital.",
        "score": 9,
    },
    "easeOfCreation": 7,
    "opportunityForGain": 8,
}


def make_record_dict(**overrides: Any) -> dict[str, Any]:
    """Deep copy of SAMPLE_RECORD with top-level overrides."""
    record = copy.deepcopy(SAMPLE_RECORD)
    record.update(overrides)
    return record


class FakeBackend(GenerationBackend):
    """Backend returning a canned reply (or raising) and recording calls."""

    name = "fake"

    def __init__(self, reply: str = "", error: Optional[BaseException] = None):
        super().__init__("fake-model")
        self.reply = reply
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def complete(self, prompt: str, *, temperature: float) -> str:
        self.calls.append({"prompt": prompt, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """One valid opportunity as the model returns it."""
    return make_record_dict()


@pytest.fixture
def ten_records() -> list[dict[str, Any]]:
    """Ten valid records with distinct business types, in order."""
    return [make_record_dict(businessType=f"Negocio {i}") for i in range(10)]


@pytest.fixture
def fake_backend(ten_records: list[dict[str, Any]]) -> FakeBackend:
    """Backend replying with ten valid records."""
    return FakeBackend(reply=json.dumps(ten_records))


@pytest.fixture
def client(fake_backend: FakeBackend) -> GenerationClient:
    """GenerationClient over fake_backend."""
    return GenerationClient(fake_backend)
