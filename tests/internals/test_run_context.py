"""Tests for the process-global session id."""

from typing import Iterator

import pytest

from slideheaders.internals import run_context


@pytest.fixture(autouse=True)
def fresh_session() -> Iterator[None]:
    run_context.reset_session_id()
    yield
    run_context.reset_session_id()


def test_session_id_is_stable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SLIDEHEADERS_SESSION_ID", raising=False)
    first = run_context.get_session_id()

    assert len(first) == 8
    assert run_context.get_session_id() == first


def test_session_id_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLIDEHEADERS_SESSION_ID", "fromenv1")
    assert run_context.get_session_id() == "fromenv1"


def test_seed_only_applies_before_generation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SLIDEHEADERS_SESSION_ID", raising=False)
    run_context.seed_session_id("seeded01")
    run_context.seed_session_id("ignored0")

    assert run_context.get_session_id() == "seeded01"
