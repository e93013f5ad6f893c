"""Tri-state outcome of looking for a workspace.

Missing means "not a JS project, let another detector try".
Broken means "this IS a JS project but its manifest is unusable" and
should be reported to the user.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

from jsworkspace.errors import WorkspaceError
from .package import WorkspaceStructure


@dataclass(frozen=True)
class Found:
    """A manifest was located and normalized."""
    workspace: WorkspaceStructure
    status: Literal["found"] = "found"


@dataclass(frozen=True)
class Broken:
    """A manifest was located but could not be normalized."""
    manifest_path: Path
    cause: WorkspaceError
    status: Literal["broken"] = "broken"


@dataclass(frozen=True)
class Missing:
    """No manifest exists within the search bounds."""
    cause: WorkspaceError
    status: Literal["missing"] = "missing"


WorkspaceSearch = Union[Found, Broken, Missing]
