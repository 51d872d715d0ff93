"""Shared fixtures for chatroute tests."""

import pytest

# Plain filler: no routing vocabulary, short sentences, no long clauses
FILLER_SENTENCE = "the cat sat on the mat. "


def make_prompt(length: int, prefix: str = "") -> str:
    """Build a prompt of exactly ``length`` characters after trimming."""
    body = prefix + FILLER_SENTENCE * (length // len(FILLER_SENTENCE) + 2)
    text = body[:length]
    if text.endswith(" "):
        text = text[:-1] + "x"
    return text


@pytest.fixture
def prompt_of():
    """Factory fixture: prompt_of(900) -> 900-char neutral prompt."""
    return make_prompt


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point config lookups at a temp dir and clear env overrides."""
    monkeypatch.setenv("CHATROUTE_HOME", str(tmp_path / "chatroute"))
    monkeypatch.delenv("CHATROUTE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHATROUTE_TRACE", raising=False)
    return tmp_path / "chatroute"
