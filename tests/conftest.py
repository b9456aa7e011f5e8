import json

import httpx
import pytest
from fastapi.testclient import TestClient

from fridge_friend.main import create_app
from fridge_friend.rate_limit import InMemoryRateLimiter
from fridge_friend.services.recipe_generator import RecipeGenerator, get_recipe_generator
from fridge_friend.settings import settings


SAMPLE_RECIPE = {
    "title": "Pan-Seared Chicken",
    "description": "Crispy chicken with a golden crust",
    "ingredientsUsed": ["chicken"],
    "ingredients": ["2 chicken breasts", "1 tsp salt", "1 tbsp cooking oil"],
    "instructions": ["Season the chicken", "Sear 6 minutes per side"],
    "prepTime": "5 minutes",
    "cookTime": "12 minutes",
    "servings": "2 servings",
}


def completion_body(content):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": settings.GROQ_MODEL,
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class FakeUpstream:
    """Stands in for the completion API behind an httpx.MockTransport."""

    def __init__(self):
        self.status_code = 200
        self.content = "```json\n" + json.dumps(SAMPLE_RECIPE) + "\n```"
        self.error_body = {"error": {"message": "upstream failure"}}
        self.raise_connect_error = False
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_connect_error:
            raise httpx.ConnectError("connection refused", request=request)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json=self.error_body)
        return httpx.Response(200, json=completion_body(self.content))

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)

    def generator(self, api_key="test-key"):
        http_client = httpx.Client(transport=httpx.MockTransport(self.handler))
        return RecipeGenerator(api_key, http_client=http_client)


@pytest.fixture()
def upstream():
    return FakeUpstream()


@pytest.fixture()
def test_app(upstream):
    app = create_app(rate_limiter=InMemoryRateLimiter(limit=10, window_sec=60))
    app.dependency_overrides[get_recipe_generator] = lambda: upstream.generator()
    return app


@pytest.fixture()
def client(test_app):
    return TestClient(test_app)


class FakeRecognizer:
    """Speech engine double; tests push results through ``emit``."""

    def __init__(self):
        self.on_start = None
        self.on_result = None
        self.on_error = None
        self.on_end = None
        self.started = 0
        self.stopped = 0

    def start(self):
        self.started += 1
        self.on_start()

    def stop(self):
        self.stopped += 1
        self.on_end()

    def emit(self, *results, index=0):
        self.on_result(list(results), index)


@pytest.fixture()
def sample_recipe():
    return dict(SAMPLE_RECIPE)


@pytest.fixture()
def recognizer():
    return FakeRecognizer()
