"""clone a repository into base/host/path

base directory and per-host mappings come from the config file,
`--base` overrides both for one invocation.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Protocol

from .clipboard import ClipboardReader
from .config import ConfigStore
from .errors import CloneProcessError, DirectoryChangeError
from .parser import parse_url
from .resolver import resolve_target

logger = logging.getLogger(__name__)

# shell conventions for commands that cannot run
GIT_NOT_FOUND = 127
GIT_NOT_EXECUTABLE = 126


class Cloner(Protocol):
    def clone(self, url: str, target: Path) -> int: ...


class GitCloner:
    def __init__(self, git: str = "git"):
        self.git = git

    def clone(self, url: str, target: Path) -> int:
        cmd = [self.git, "clone", url, str(target)]
        logger.info(f"Running: {' '.join(cmd)}")

        try:
            return subprocess.run(cmd).returncode
        except FileNotFoundError as e:
            raise CloneProcessError(GIT_NOT_FOUND, f"{self.git} not found") from e
        except PermissionError as e:
            raise CloneProcessError(
                GIT_NOT_EXECUTABLE, f"{self.git} is not executable"
            ) from e
        except OSError as e:
            raise CloneProcessError(1, f"cannot run {self.git}: {e}") from e


def clone_repository(url: str, target: Path, cloner: Cloner) -> None:
    logger.info(f"Cloning with git {url} to {target}...")
    returncode = cloner.clone(url, target)
    if returncode != 0:
        logger.info("Failed to clone repository")
        raise CloneProcessError(returncode)


def change_directory(target: Path, skip: bool = False) -> None:
    if skip:
        return

    logger.info(f"Changing directory to {target}")
    try:
        os.chdir(target)
    except OSError as e:
        raise DirectoryChangeError(f"cannot change directory to {target}: {e}") from e


def clone(
    url: str | None,
    base: Path | None,
    no_cwd: bool,
    *,
    store: ConfigStore,
    cloner: Cloner,
    clipboard: ClipboardReader,
) -> Path:
    logger.info(f"Configuration path: {store.path}")
    config = store.load()

    if url is None:
        url = clipboard.read()
    url = url.strip()

    parsed = parse_url(url)
    target = resolve_target(parsed, base, config)
    logger.info(f"Target: {target}")

    clone_repository(url, target, cloner)
    change_directory(target, skip=no_cwd)

    return target
