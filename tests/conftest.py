"""Shared test doubles for the translation pipeline."""

from typing import List, Sequence

import pytest


class ScriptedClient:
    """TranslationClient fake that replays scripted outcomes.

    Each call pops the next outcome: an exception is raised, a list is
    returned. Once the script is empty every string is echoed back with a
    language prefix.
    """

    def __init__(self, outcomes=None):
        self.outcomes = list(outcomes or [])
        self.calls: List[tuple] = []

    async def translate(self, batch: Sequence[str], target_lang_code: str) -> List[str]:
        self.calls.append((list(batch), target_lang_code))
        if self.outcomes:
            outcome = self.outcomes.pop(0)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        return [f"[{target_lang_code}] {text}" for text in batch]


class SleepRecorder:
    """Awaitable stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def echo_client():
    return ScriptedClient()
