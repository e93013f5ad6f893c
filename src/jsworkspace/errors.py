"""Exceptions raised while locating and normalizing a package.json.

Nothing here escapes :func:`jsworkspace.javascript.get_workspace`;
every error ends up as the ``cause`` of a Broken or Missing outcome.
"""

from pathlib import Path
from typing import Optional

from jsworkspace.codes import ErrorCode


class WorkspaceError(Exception):
    """Base class for discovery failures."""

    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WorkspaceError):
    """The manifest file does not exist within the search bounds."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, name: str, start_dir: Path, clamp_to_dir: Optional[Path] = None):
        self.name = name
        self.start_dir = start_dir
        self.clamp_to_dir = clamp_to_dir
        if clamp_to_dir is None:
            message = f"couldn't find '{name}' in {start_dir} or any parent directory"
        else:
            message = (
                f"couldn't find '{name}' in {start_dir} or any parent directory "
                f"up to {clamp_to_dir}"
            )
        super().__init__(message)


class ManifestReadError(WorkspaceError):
    """The manifest exists but could not be read."""

    code = ErrorCode.MANIFEST_READ_ERROR

    def __init__(self, manifest_path: Path, details: str):
        self.manifest_path = manifest_path
        self.details = details
        super().__init__(f"failed to read {manifest_path}: {details}")


class ManifestParseError(WorkspaceError):
    """The manifest is not a valid package.json document."""

    code = ErrorCode.MANIFEST_PARSE_ERROR

    def __init__(self, manifest_path: Path, details: str):
        self.manifest_path = manifest_path
        self.details = details
        super().__init__(f"failed to parse {manifest_path}: {details}")


class NamelessPackageError(WorkspaceError):
    """The manifest has no name, which usually means a virtual workspace manifest."""

    code = ErrorCode.NAMELESS_PACKAGE

    def __init__(self, manifest_path: Path):
        self.manifest_path = manifest_path
        super().__init__(
            f"your package doesn't have a name: {manifest_path}\n"
            "  npm workspaces with a nameless root manifest aren't supported"
        )


class BuildInfoParseError(WorkspaceError):
    """The binary declarations of the manifest could not be understood."""

    code = ErrorCode.BUILD_INFO_PARSE_ERROR

    def __init__(self, manifest_path: Path, details: str):
        self.manifest_path = manifest_path
        self.details = details
        super().__init__(
            f"failed to read the binaries declared by {manifest_path}: {details}"
        )


class AutoIncludeError(WorkspaceError):
    """The package root could not be scanned for README/LICENSE/CHANGELOG files."""

    code = ErrorCode.AUTO_INCLUDE_ERROR

    def __init__(self, directory: Path, details: str):
        self.directory = directory
        self.details = details
        super().__init__(f"failed to scan {directory} for auxiliary files: {details}")
