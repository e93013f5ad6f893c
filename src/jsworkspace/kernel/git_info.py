"""Best-effort parsing of npm ``repository`` strings.

npm lets ``repository`` be a URL or a shorthand like ``github:owner/repo``,
``gitlab:owner/repo`` or just ``owner/repo``. Anything that can't be
understood resolves to ``None``; callers treat the field as optional.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlsplit


@dataclass(frozen=True)
class GitHost:
    """A git hosting service with well-known URL conventions."""
    shortcut: str
    domain: str


HOSTS: Dict[str, GitHost] = {
    "github": GitHost(shortcut="github", domain="github.com"),
    "gitlab": GitHost(shortcut="gitlab", domain="gitlab.com"),
    "bitbucket": GitHost(shortcut="bitbucket", domain="bitbucket.org"),
    "gist": GitHost(shortcut="gist", domain="gist.github.com"),
}

_HOSTS_BY_DOMAIN = {host.domain: host for host in HOSTS.values()}
_HOSTS_BY_DOMAIN["www.github.com"] = HOSTS["github"]

_URL_SCHEMES = {"git+https", "https", "git+http", "http", "git", "git+ssh", "ssh"}

# "owner/repo", but not "./path", "@scope/pkg" or anything with a scheme
_BARE_SHORTHAND_RE = re.compile(r"^[^@%/\s.:-][^:@%/\s]*/[^@:%/\s]+$")
_SHORTCUT_RE = re.compile(r"^(?P<host>[a-z]+):(?!//)(?P<path>.+)$")
_SCP_RE = re.compile(r"^(?:[^@/\s]+@)?(?P<domain>[^:/\s]+):(?!//)(?P<path>[^\s]+)$")


@dataclass(frozen=True)
class GitInfo:
    """A parsed repository reference.

    Either ``host`` is set (a known hosting service) or ``url`` is.
    """
    host: Optional[GitHost] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    committish: Optional[str] = None
    url: Optional[str] = None

    def https(self) -> Optional[str]:
        """Browser-friendly https URL of the repository, if there is one."""
        if self.host is None:
            return self.url
        if self.host.shortcut == "gist":
            return f"https://{self.host.domain}/{self.repo}"
        return f"https://{self.host.domain}/{self.owner}/{self.repo}"


def _strip_git_suffix(name: str) -> str:
    return name[:-4] if name.endswith(".git") else name


def _hosted(host: GitHost, path: str, committish: Optional[str]) -> Optional[GitInfo]:
    segments = [segment for segment in path.strip("/").split("/") if segment]
    if host.shortcut == "gist":
        if not segments:
            return None
        return GitInfo(host=host, repo=_strip_git_suffix(segments[-1]), committish=committish)
    if len(segments) < 2:
        return None
    repo = _strip_git_suffix(segments[-1])
    if not repo:
        return None
    # gitlab allows nested groups: group/subgroup/repo
    owner = "/".join(segments[:-1])
    return GitInfo(host=host, owner=owner, repo=repo, committish=committish)


def parse_git_info(spec: str) -> Optional[GitInfo]:
    """Parse a repository string, returning ``None`` if it isn't recognized."""
    spec = spec.strip()
    if not spec:
        return None
    body, _, committish = spec.partition("#")
    committish = committish or None

    shortcut = _SHORTCUT_RE.match(body)
    if shortcut and shortcut.group("host") in HOSTS:
        return _hosted(HOSTS[shortcut.group("host")], shortcut.group("path"), committish)

    if _BARE_SHORTHAND_RE.match(body):
        return _hosted(HOSTS["github"], body, committish)

    if "://" not in body:
        scp = _SCP_RE.match(body)
        if scp and scp.group("domain") in _HOSTS_BY_DOMAIN:
            return _hosted(_HOSTS_BY_DOMAIN[scp.group("domain")], scp.group("path"), committish)
        return None

    try:
        parts = urlsplit(body)
        domain = parts.hostname
    except ValueError:
        return None
    if parts.scheme not in _URL_SCHEMES or not domain:
        return None
    if domain in _HOSTS_BY_DOMAIN:
        return _hosted(_HOSTS_BY_DOMAIN[domain], parts.path, committish)

    scheme = parts.scheme[len("git+"):] if parts.scheme.startswith("git+") else parts.scheme
    if scheme not in ("http", "https"):
        return None
    return GitInfo(url=body[len("git+"):] if body.startswith("git+") else body, committish=committish)
