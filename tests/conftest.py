import random

import pytest

from genpass.clipboard import Clipboard
from genpass.config import DEFAULT_CONFIG


class FakeClipboard(Clipboard):
    name = "fake"

    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.copied: list[str] = []

    def copy(self, text: str) -> bool:
        self.copied.append(text)
        return self.succeed


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeWindow:
    """Just enough of a curses window to render into."""

    def __init__(self, height: int = 40, width: int = 100) -> None:
        self.height = height
        self.width = width
        self.cells: dict[tuple[int, int], str] = {}
        self.attrs: dict[tuple[int, int], int] = {}
        self.refreshes = 0
        self.timeouts: list[int] = []
        self.keys: list[int] = []

    def getmaxyx(self):
        return self.height, self.width

    def erase(self) -> None:
        self.cells.clear()
        self.attrs.clear()

    def addstr(self, y, x, text, attr=0) -> None:
        assert 0 <= y < self.height
        assert 0 <= x and x + len(text) <= self.width
        for offset, ch in enumerate(text):
            self.cells[(y, x + offset)] = ch
            self.attrs[(y, x + offset)] = attr

    def refresh(self) -> None:
        self.refreshes += 1

    def timeout(self, ms: int) -> None:
        self.timeouts.append(ms)

    def getch(self) -> int:
        return self.keys.pop(0) if self.keys else -1

    def row(self, y: int) -> str:
        return "".join(self.cells.get((y, x), " ") for x in range(self.width)).rstrip()

    def text(self) -> str:
        return "\n".join(self.row(y) for y in range(self.height))


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return DEFAULT_CONFIG


@pytest.fixture
def window():
    return FakeWindow()


@pytest.fixture
def failing_clipboard():
    return FakeClipboard(succeed=False)


@pytest.fixture
def make_window():
    return FakeWindow
