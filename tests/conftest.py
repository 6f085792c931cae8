"""Shared pytest fixtures for widgetpipe tests."""

import pytest

from widgetpipe.widget import AnimationEngine, Widget


class FakeClock:
    """Manually advanced clock for the animation engine."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    """Animation engine driven by the fake clock."""
    return AnimationEngine(clock=clock)


@pytest.fixture
def widget(engine):
    return Widget("widget", animation_engine=engine)


@pytest.fixture
def tree(engine):
    """root -> (a -> (a1, a2), b)

    Returns a dict of name -> widget.
    """
    root = Widget("root", animation_engine=engine)
    a = root.add_child(Widget("a", animation_engine=engine))
    a1 = a.add_child(Widget("a1", animation_engine=engine))
    a2 = a.add_child(Widget("a2", animation_engine=engine))
    b = root.add_child(Widget("b", animation_engine=engine))
    return {"root": root, "a": a, "a1": a1, "a2": a2, "b": b}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the user's config directory and env vars."""
    monkeypatch.setenv("WIDGETPIPE_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("WIDGETPIPE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WIDGETPIPE_TICK_INTERVAL", raising=False)
