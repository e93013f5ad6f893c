"""Public API for jsworkspace.

High-level functions that return complete, structured results.
Callers should use these instead of importing from _internal.
"""

import os
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel

from jsworkspace.javascript import get_workspace
from jsworkspace.kernel.package import PackageInfo, WorkspaceStructure
from jsworkspace.kernel.search import Broken, Found, Missing, WorkspaceSearch


class DiscoveryReport(BaseModel):
    """Stable, JSON-friendly summary of a discovery attempt."""
    status: Literal["found", "broken", "missing"]
    manifest_path: Optional[Path] = None
    error_code: Optional[str] = None  # ErrorCode value for broken/missing
    error: Optional[str] = None  # human-readable cause
    workspace: Optional[WorkspaceStructure] = None

    @property
    def package(self) -> Optional[PackageInfo]:
        """The single package of a found workspace."""
        if self.workspace is None:
            return None
        return self.workspace.packages[0]


def report_from_search(search: WorkspaceSearch) -> DiscoveryReport:
    """Convert a Found/Broken/Missing outcome into a DiscoveryReport."""
    if isinstance(search, Found):
        return DiscoveryReport(
            status="found",
            manifest_path=search.workspace.workspace.manifest_path,
            workspace=search.workspace,
        )
    if isinstance(search, Broken):
        return DiscoveryReport(
            status="broken",
            manifest_path=search.manifest_path,
            error_code=search.cause.code.value,
            error=str(search.cause),
        )
    if isinstance(search, Missing):
        return DiscoveryReport(
            status="missing",
            error_code=search.cause.code.value,
            error=str(search.cause),
        )
    raise TypeError(f"not a workspace search result: {search!r}")


def discover(
    start_dir: Union[str, os.PathLike],
    clamp_to_dir: Optional[Union[str, os.PathLike]] = None,
) -> DiscoveryReport:
    """Look for an npm package and summarize the outcome.

    Args:
        start_dir: Directory to start searching from
        clamp_to_dir: Optional ancestor of start_dir to stop at (inclusive)

    Returns:
        DiscoveryReport; use get_workspace() for the typed exception cause
    """
    return report_from_search(get_workspace(start_dir, clamp_to_dir))


__all__ = [
    "DiscoveryReport",
    "discover",
    "get_workspace",
    "report_from_search",
]
