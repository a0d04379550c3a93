import logging
from pathlib import Path

from .config import Config
from .errors import InvalidUrlError
from .parser import ParsedRepositoryUrl

logger = logging.getLogger(__name__)

VCS_SUFFIX = ".git"


def normalize_path(path: str) -> str:
    """org/repo from /org/repo.git, nested groups are kept as is"""
    path = path.removeprefix("/")
    path = path.removesuffix(VCS_SUFFIX)
    return path


def resolve_target(
    parsed: ParsedRepositoryUrl,
    explicit_base: Path | None,
    config: Config,
) -> Path:
    """Directory to clone `parsed` into.

    The host root is chosen by precedence:

    1. `explicit_base / host`, when a base is given for this invocation
    2. `config.mappings[host]`, used verbatim
    3. `config.base / host`
    """
    host = parsed.host
    if host is None:
        raise InvalidUrlError(f"no host in {parsed}")

    if explicit_base is not None:
        base_dir = Path(explicit_base) / host
    elif host in config.mappings:
        base_dir = Path(config.mappings[host])
    else:
        base_dir = Path(config.base) / host
    logger.debug(f"{base_dir=}")

    path = normalize_path(parsed.path)
    if not path:
        raise InvalidUrlError(f"no repository path in {parsed}")
    # joining an absolute path would drop base_dir
    if Path(path).is_absolute():
        raise InvalidUrlError(f"repository path escapes the base directory in {parsed}")

    return base_dir / path
