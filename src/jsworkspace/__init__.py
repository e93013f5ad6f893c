"""jsworkspace: find an npm package and describe it for release tooling."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("jsworkspace")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from jsworkspace.api import discover, get_workspace, DiscoveryReport
from jsworkspace.codes import ErrorCode
from jsworkspace.errors import WorkspaceError
from jsworkspace.kernel.package import PackageInfo, Version, WorkspaceInfo, WorkspaceKind, WorkspaceStructure
from jsworkspace.kernel.search import Broken, Found, Missing, WorkspaceSearch

__all__ = [
    "__version__",
    "discover",
    "get_workspace",
    "DiscoveryReport",
    "ErrorCode",
    "WorkspaceError",
    "PackageInfo",
    "Version",
    "WorkspaceInfo",
    "WorkspaceKind",
    "WorkspaceStructure",
    "Found",
    "Broken",
    "Missing",
    "WorkspaceSearch",
]
