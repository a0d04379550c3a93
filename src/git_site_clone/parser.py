import logging
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from .errors import InvalidUrlError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedRepositoryUrl:
    host: str | None
    path: str

    def __str__(self) -> str:
        return f"{self.host}:{self.path}"


# scp-like syntax, e.g. git@github.com:org/repo.git
# a path starting with // belongs to a scheme URL instead
SCP_LIKE_PATTERN = re.compile(
    r"^(?:(?P<user>[^@/:\s\[\]]+)@)?(?P<host>[^@/:\s\[\]]+):(?!//)(?P<path>.*)$"
)
# bracketed host, e.g. git@[::1]:org/repo.git or [git@host:2222]:org/repo.git
SCP_BRACKETED_PATTERN = re.compile(
    r"^(?:(?P<user>[^@/:\s\[\]]+)@)?\[(?P<host>[^\]\s]+)\]:(?P<path>.*)$"
)
HOST_PORT_PATTERN = re.compile(r"^(?P<host>[^:]+):\d+$")
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def _bracketed_host(inner: str) -> str | None:
    # [user@host:port] or an IPv6 address such as [::1]
    _, _, host = inner.rpartition("@")
    if match := HOST_PORT_PATTERN.match(host):
        host = match["host"]
    return host or None


def parse_url(url: str) -> ParsedRepositoryUrl:
    """Split a repository URL into host and path.

    Accepts scheme URLs (https://, ssh://, git://, file://, ...) and
    the scp-like `[user@]host:path` form git understands. The host is
    None for URLs that name a local repository (file://).
    """
    url = url.strip()
    if not url:
        raise InvalidUrlError("empty repository url")

    if SCHEME_PATTERN.match(url):
        try:
            parts = urlsplit(url)
            host = parts.hostname
        except ValueError as e:
            raise InvalidUrlError(f"invalid repository url {url!r}: {e}") from e
        parsed = ParsedRepositoryUrl(host=host or None, path=parts.path)
    elif match := SCP_BRACKETED_PATTERN.match(url):
        parsed = ParsedRepositoryUrl(
            host=_bracketed_host(match["host"]), path=match["path"]
        )
    else:
        match = SCP_LIKE_PATTERN.match(url)
        if match is None:
            raise InvalidUrlError(f"invalid repository url {url!r}")
        parsed = ParsedRepositoryUrl(host=match["host"], path=match["path"])

    logger.debug(f"{parsed=}")

    if parsed.host is None:
        raise InvalidUrlError(f"no host in repository url {url!r}")
    return parsed
