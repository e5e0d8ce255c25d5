import httpx
import pytest

from app.llm.parser import CommandParser
from app.pipeline import AssistantPipeline

API_KEY = "test-key"


def completion(content):
    """Minimal chat.completion envelope as DeepSeek returns it."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "deepseek-chat",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class FakeUpstream:
    """httpx MockTransport handler that records requests and replays a canned reply."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = completion("{}")
        self.text = None
        self.error = None

    def reply(self, content):
        self.status_code = 200
        self.payload = completion(content)
        self.text = None

    def fail(self, status_code, text):
        self.status_code = status_code
        self.payload = None
        self.text = text

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.payload is not None:
            return httpx.Response(self.status_code, json=self.payload)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def calls(self):
        return len(self.requests)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_parser(upstream):
    def _make(api_key=API_KEY):
        client = httpx.Client(transport=httpx.MockTransport(upstream))
        return CommandParser(api_key=api_key, http_client=client)

    return _make


@pytest.fixture
def make_pipeline(make_parser):
    def _make(api_key=API_KEY):
        return AssistantPipeline(make_parser(api_key))

    return _make
