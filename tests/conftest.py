"""Shared fakes for the poll loop tests."""

from __future__ import annotations

from typing import List, Tuple

import pytest

from headsetnotify.source import StatusSourceError


def headsetcontrolBlock(name: str, status: str | None = None, level: str | None = None) -> str:
    lines = [f"Found {name}!"]
    if status is not None:
        lines.append(f"Status: {status}")
    if level is not None:
        lines.append(f"Level: {level}")
    return "\n".join(lines) + "\n"


class FakeSource:
    def __init__(self, outputs: List[str | Exception]):
        self.outputs = list(outputs)
        self.calls = 0

    def fetchStatus(self) -> str:
        self.calls += 1
        output = self.outputs.pop(0) if len(self.outputs) > 1 else self.outputs[0]
        if isinstance(output, Exception):
            raise output
        return output


class RecordingNotifier:
    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []

    def notify(self, title: str, body: str, icon: str) -> bool:
        self.sent.append((title, body, icon))
        return True

    @property
    def bodies(self) -> List[str]:
        return [body for _, body, _ in self.sent]


class FakeSleep:
    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fakeSleep():
    return FakeSleep()


@pytest.fixture
def failingSource():
    return FakeSource([StatusSourceError("headsetcontrol missing")])
