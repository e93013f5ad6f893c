"""Support for npm-based JavaScript projects.

The model here is deliberately naive: the first package.json found walking
up from the start directory is "the" package, and it must have a name.
npm workspaces (a nameless root manifest listing member packages) are not
understood.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from jsworkspace._internal.auto_includes import find_auto_includes, merge_auto_includes
from jsworkspace._internal.find import find_file
from jsworkspace._internal.io.manifest import load_build_manifest, load_manifest
from jsworkspace.errors import NamelessPackageError, WorkspaceError
from jsworkspace.kernel.git_info import parse_git_info
from jsworkspace.kernel.manifest import Manifest, RepositoryObject
from jsworkspace.kernel.package import (
    PackageInfo,
    Version,
    WorkspaceInfo,
    WorkspaceKind,
    WorkspaceStructure,
    split_scope,
)
from jsworkspace.kernel.search import Broken, Found, Missing, WorkspaceSearch

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
TARGET_DIR_NAME = "node_modules"

# npm is really npm.cmd on Windows, and subprocess won't find it without the extension
JS_PROGRAM_EXT = ".cmd" if os.name == "nt" else ""


def get_workspace(
    start_dir: Union[str, os.PathLike],
    clamp_to_dir: Optional[Union[str, os.PathLike]] = None,
) -> WorkspaceSearch:
    """Find an npm package at start_dir or one of its ancestors.

    The walk stops at clamp_to_dir (inclusive) when given, typically the
    root of the git repository. If only part of a multi-package workspace
    is inside clamp_to_dir the result is unspecified: the real workspace
    root may or may not be found.

    Returns:
        Found with the workspace, Broken if a package.json exists but is
        unusable, Missing if there is no package.json at all.
    """
    try:
        manifest_path = workspace_manifest(start_dir, clamp_to_dir)
    except WorkspaceError as e:
        logger.debug("no %s found: %s", MANIFEST_NAME, e)
        return Missing(cause=e)

    try:
        workspace = read_workspace(manifest_path)
    except WorkspaceError as e:
        logger.debug("%s is broken: %s", manifest_path, e)
        return Broken(manifest_path=manifest_path, cause=e)
    return Found(workspace=workspace)


def workspace_manifest(
    start_dir: Union[str, os.PathLike],
    clamp_to_dir: Optional[Union[str, os.PathLike]] = None,
) -> Path:
    """Find a package.json, starting at start_dir and walking up to clamp_to_dir."""
    return find_file(MANIFEST_NAME, start_dir, clamp_to_dir)


def read_workspace(manifest_path: Path) -> WorkspaceStructure:
    """Normalize the package.json at manifest_path into a one-package workspace.

    Raises:
        ManifestReadError, ManifestParseError: the manifest is unreadable
        NamelessPackageError: the manifest has no name
        BuildInfoParseError: the binary declarations are malformed
        AutoIncludeError: the package root can't be listed
    """
    manifest_path = Path(manifest_path)
    root = manifest_path.parent
    manifest = load_manifest(manifest_path)

    target_dir = root / TARGET_DIR_NAME
    root_auto_includes = find_auto_includes(root)

    if not manifest.name:
        raise NamelessPackageError(manifest_path)
    true_name = manifest.name
    npm_scope, name = split_scope(true_name)
    version = Version.npm(manifest.version) if manifest.version is not None else None

    # The double read is accepted: a bad bin table must be reported as such
    build_manifest = load_build_manifest(manifest_path)
    binaries = build_manifest.binaries()

    info = PackageInfo(
        true_name=true_name,
        true_version=version,
        name=name,
        npm_scope=npm_scope,
        version=version,
        manifest_path=manifest_path,
        dist_manifest_path=None,
        package_root=root,
        description=manifest.description,
        authors=_authors(manifest),
        license=manifest.license,
        publish=True,
        repository_url=_repository_url(manifest),
        homepage_url=manifest.homepage,
        keywords=list(manifest.keywords) or None,
        documentation_url=None,
        readme_file=None,
        license_files=[],
        changelog_file=None,
        binaries=binaries,
        cdylibs=[],
        cstaticlibs=[],
        cargo_metadata_table=None,
        cargo_package_id=None,
        build_command=_build_command(manifest),
        axoupdater_versions={},
        dist=None,
    )
    merge_auto_includes(info, root_auto_includes)
    logger.debug("found npm package %s with binaries %s", true_name, binaries)

    return WorkspaceStructure(
        sub_workspaces=[],
        packages=[info],
        workspace=WorkspaceInfo(
            kind=WorkspaceKind.JAVASCRIPT,
            target_dir=target_dir,
            workspace_dir=root,
            manifest_path=manifest_path,
            dist_manifest_path=None,
            root_auto_includes=root_auto_includes,
        ),
    )


def _authors(manifest: Manifest) -> List[str]:
    if manifest.author is None:
        return []
    if isinstance(manifest.author, str):
        return [manifest.author]
    # TODO: turn {"name", "email", "url"} objects into "name <email> (url)"
    logger.info("ignoring object-form author in %s, only strings are supported", manifest.name)
    return []


def _repository_url(manifest: Manifest) -> Optional[str]:
    repository = manifest.repository
    if repository is None:
        return None
    if isinstance(repository, RepositoryObject):
        return repository.url
    info = parse_git_info(repository)
    url = info.https() if info is not None else None
    if url is None:
        logger.debug("ignoring repository %r, not a recognized git URL or shorthand", repository)
    return url


def _build_command(manifest: Manifest) -> Optional[List[str]]:
    # A "dist" script is assumed to be meant for us
    if "dist" not in manifest.scripts:
        return None
    return [f"npm{JS_PROGRAM_EXT}", "run", "dist"]
