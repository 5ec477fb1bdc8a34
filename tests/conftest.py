"""
Shared fixtures: a stub chat model standing in for Gemini.
"""
import time

import pytest
from fastapi.testclient import TestClient

from wisdomwell.ai.llm_client import get_model
from wisdomwell.server import app


class StubStructuredModel:
    def __init__(self, parent, schema):
        self.parent = parent
        self.schema = schema

    def invoke(self, prompt):
        self.parent.prompts.append(prompt)
        self.parent.schemas.append(self.schema)
        if self.parent.delay:
            time.sleep(self.parent.delay)
        if self.parent.error is not None:
            raise self.parent.error
        response = self.parent.responses.pop(0)
        if callable(response):
            return response(prompt)
        return response


class StubModel:
    """Records prompts; replies with queued responses in order."""

    def __init__(self, *responses, error=None, delay=0.0):
        self.responses = list(responses)
        self.error = error
        self.delay = delay
        self.prompts = []
        self.schemas = []

    def with_structured_output(self, schema):
        return StubStructuredModel(self, schema)

    @property
    def call_count(self):
        return len(self.prompts)


@pytest.fixture
def stub_model_factory():
    return StubModel


@pytest.fixture
def api_client():
    """TestClient plus a setter for the model the endpoints will receive."""
    def use_model(model):
        app.dependency_overrides[get_model] = lambda: model
        return model

    client = TestClient(app)
    yield client, use_model
    app.dependency_overrides.clear()


@pytest.fixture
def buddhism_entry_payload():
    return {
        "scripture": "Dhammapada",
        "chapter": "Chapter 15",
        "verses": "204",
        "answer": "Health is the greatest gift, contentment the greatest wealth.",
        "aiInsight": "Purpose according to Dhammapada: Peace grows from contentment.",
        "religion": "Buddhism",
        "category": "Sutta Pitaka",
    }
