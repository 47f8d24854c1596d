"""Shared pytest fixtures for wslgit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from pathlib import Path

import pytest

from wslgit.config import Config
from wslgit.features.dispatch import ProcessOutcome


class FakeFileSystem:
    """In-memory filesystem answering lookups on host-style path strings."""

    def __init__(
        self,
        existing: Iterable[str] = (),
        canonical: Mapping[str, str] | None = None,
    ) -> None:
        self.existing: set[str] = set(existing)
        self.canonical: dict[str, str] = dict(canonical or {})
        self.lookups: list[str] = []

    def exists(self, path: str) -> bool:
        self.lookups.append(path)
        return path in self.existing

    def canonicalize(self, path: str) -> str:
        if path in self.canonical:
            return self.canonical[path]
        if path in self.existing:
            return path
        raise FileNotFoundError(path)


class FakeRunner:
    """Process runner recording calls and returning a canned outcome."""

    def __init__(self, outcome: ProcessOutcome | None = None, error: OSError | None = None) -> None:
        self.outcome = outcome or ProcessOutcome(returncode=0)
        self.error = error
        self.calls: list[tuple[list[str], dict[str, str], bool]] = []

    def run(
        self,
        argv: Sequence[str],
        env: Mapping[str, str],
        capture_stdout: bool,
    ) -> ProcessOutcome:
        self.calls.append((list(argv), dict(env), capture_stdout))
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture
def make_filesystem() -> Callable[..., FakeFileSystem]:
    """Build fake filesystems with the given existing paths."""

    def _make(
        existing: Iterable[str] = (),
        canonical: Mapping[str, str] | None = None,
    ) -> FakeFileSystem:
        return FakeFileSystem(existing, canonical)

    return _make


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Build fake process runners."""

    def _make(
        outcome: ProcessOutcome | None = None,
        error: OSError | None = None,
    ) -> FakeRunner:
        return FakeRunner(outcome, error)

    return _make


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the singleton."""

    config_path = tmp_path / "wslgit" / "config.toml"
    monkeypatch.setenv("WSLGIT_CONFIG", str(config_path))
    Config.reset()
    try:
        yield config_path
    finally:
        Config.reset()
