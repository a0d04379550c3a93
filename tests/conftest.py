"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from git_site_clone.config import ConfigStore
from git_site_clone.errors import ClipboardUnavailableError


class FakeCloner:
    """Records clone calls, creates the target unless told to fail."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[str, Path]] = []

    def clone(self, url: str, target: Path) -> int:
        self.calls.append((url, target))
        if self.returncode == 0:
            target.mkdir(parents=True, exist_ok=True)
        return self.returncode


class FakeClipboard:
    def __init__(self, content: str | None = None) -> None:
        self.content = content

    def read(self) -> str:
        if self.content is None:
            raise ClipboardUnavailableError("no clipboard")
        return self.content


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config" / "default-config.toml"


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    """A config store backed by a temporary directory."""
    return ConfigStore(config_path)


@pytest.fixture
def cloner() -> FakeCloner:
    return FakeCloner()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in a scratch directory, restored after the test."""
    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.chdir(path)
    return path
