import pytest
from fastapi.testclient import TestClient

from featuregen.config import Settings
from featuregen.main import create_app


FENCED_REPLY = """Here are the features:
```json
[
  {
    "name": "Login",
    "description": "Email and password sign in",
    "userStories": ["As a user I can sign in"],
    "technicalDetails": ["JWT sessions"],
    "priority": "high"
  },
  {"name": "Search", "description": "Full text search"}
]
```
"""


class FakeModel:
    def __init__(self, reply=FENCED_REPLY, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture
def make_client():
    def _make(model):
        app = create_app(settings=Settings(gemini_api_key="test-key"), client=model)
        return TestClient(app)
    return _make
