"""Shared test fixtures.

FakeClient stands in for ChatClient at the service boundary: it replays
canned responses in order and records every prompt it was sent.
"""

from dataclasses import dataclass
from typing import List, Optional

import pytest


@dataclass
class FakeConfig:
    model: str = "fake-model"
    base_url: str = "http://llm.invalid/v1"


class FakeClient:
    def __init__(self, responses: Optional[List[Optional[str]]] = None,
                 credentials: bool = True):
        self.config = FakeConfig()
        self.responses = list(responses or [])
        self.credentials = credentials
        self.calls = []
        self.tracker = None

    def has_credentials(self) -> bool:
        return self.credentials

    def set_tracker(self, tracker):
        self.tracker = tracker

    def generate(self, prompt, system_prompt=None, temperature=None, call_name=None):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt,
                           "call_name": call_name})
        if not self.responses:
            return None
        return self.responses.pop(0)


@pytest.fixture
def fake_client():
    """Factory: fake_client(responses, credentials=True)."""
    def _make(responses=None, credentials=True):
        return FakeClient(responses, credentials)
    return _make


@pytest.fixture
def offline_client():
    """A client with no API key configured."""
    return FakeClient(credentials=False)
