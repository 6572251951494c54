# Shared stub model clients for the test suite.
import threading

import pytest

PETSTORE_SPEC = """{
  "openapi": "3.0.0",
  "info": {"title": "Petstore", "version": "1.2.0"},
  "paths": {
    "/pets": {"get": {}, "post": {}},
    "/pets/{petId}": {"get": {}, "delete": {}},
    "/stores": {"get": {}}
  },
  "components": {
    "securitySchemes": {
      "petstore_auth": {
        "type": "oauth2",
        "flows": {"authorizationCode": {"scopes": {"read:pets": "read", "write:pets": "write"}}}
      },
      "api_key": {"type": "apiKey", "in": "header", "name": "X-API-Key"}
    },
    "schemas": {"Pet": {}, "Error": {}}
  }
}"""


class StubClient:
    """Returns canned text keyed on what the prompt asks for; records prompts."""

    def __init__(self, sections=None, subsections=None, questions="1. First?\n2. Second?\n3. Third?\n4. Fourth?"):
        self.model = "stub"
        self.sections = sections or {}
        self.subsections = subsections or {}
        self.questions = questions
        self.prompts = []
        self.params = []
        self._lock = threading.Lock()

    def generate(self, prompt, params):
        with self._lock:
            self.prompts.append(prompt)
            self.params.append(params)
        if prompt.startswith("Based on this documentation"):
            return self.questions, {"engine": "stub"}
        if prompt.startswith("Generate the \""):
            title = prompt.split('"')[1]
            return self.subsections.get(title, f"## {title}\nSteps for {title}."), {"engine": "stub"}
        for name in ("Overview", "Authentication", "Error Handling", "Glossary"):
            if f'Start with "# {name}"' in prompt:
                return self.sections.get(name, f"# {name}\nBody of {name}."), {"engine": "stub"}
        return "", {"engine": "stub"}


class FailingClient:
    model = "failing"

    def __init__(self, message="inference endpoint unavailable", fail_on=None):
        self.message = message
        self.fail_on = fail_on

    def generate(self, prompt, params):
        if self.fail_on is None or self.fail_on in prompt:
            raise RuntimeError(self.message)
        return "# Ok\ntext", {"engine": "failing"}


@pytest.fixture
def petstore_spec():
    return PETSTORE_SPEC


@pytest.fixture
def stub_client():
    return StubClient()
