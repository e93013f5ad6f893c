"""Pydantic models for normalized package and workspace descriptors.

These are ecosystem-agnostic on purpose: a JavaScript package fills the
fields that make sense for npm and sets everything else to an explicit
empty sentinel, so downstream release tooling sees one shape for every
kind of project.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


def split_scope(true_name: str) -> Tuple[Optional[str], str]:
    """Split "@scope/name" on the first "/" into ("scope", "name").

    Names without a "/" have no scope and are returned whole.
    """
    if "/" not in true_name:
        return None, true_name
    scope, _, name = true_name.partition("/")
    if scope.startswith("@"):
        scope = scope[1:]
    return scope, name


class WorkspaceKind(str, Enum):
    """Which ecosystem a workspace belongs to."""
    GENERIC = "generic"
    RUST = "rust"
    JAVASCRIPT = "javascript"


class Version(BaseModel):
    """A package version tagged with the ecosystem it came from.

    Versions of different ecosystems follow different rules, so they are
    never compared as bare strings.
    """
    kind: Literal["npm"] = "npm"
    value: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def npm(cls, value: str) -> "Version":
        return cls(kind="npm", value=value)

    def __str__(self) -> str:
        return self.value


class AutoIncludes(BaseModel):
    """README/LICENSE/CHANGELOG files found next to a manifest."""
    readme: Optional[Path] = None
    licenses: List[Path] = Field(default_factory=list)
    changelog: Optional[Path] = None


class PackageInfo(BaseModel):
    """Everything a release pipeline needs to know about one package."""
    true_name: str  # name exactly as the manifest spells it, e.g. "@foo/bar"
    true_version: Optional[Version] = None
    name: str  # scope-stripped, e.g. "bar"
    npm_scope: Optional[str] = None  # e.g. "foo" (no "@")
    version: Optional[Version] = None
    manifest_path: Path
    dist_manifest_path: Optional[Path] = None
    package_root: Path
    description: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    license: Optional[str] = None
    publish: bool = True
    repository_url: Optional[str] = None
    homepage_url: Optional[str] = None
    keywords: Optional[List[str]] = None  # never an empty list
    documentation_url: Optional[str] = None
    readme_file: Optional[Path] = None
    license_files: List[Path] = Field(default_factory=list)
    changelog_file: Optional[Path] = None
    binaries: List[str] = Field(default_factory=list)  # sorted, unique
    cdylibs: List[str] = Field(default_factory=list)
    cstaticlibs: List[str] = Field(default_factory=list)
    cargo_metadata_table: Optional[Dict[str, Any]] = None
    cargo_package_id: Optional[str] = None
    build_command: Optional[List[str]] = None
    axoupdater_versions: Dict[str, Version] = Field(default_factory=dict)
    dist: Optional[bool] = None

    model_config = ConfigDict(validate_assignment=True)

    @model_validator(mode="after")
    def check_identity(self) -> "PackageInfo":
        """Keep name/scope and root/manifest consistent with each other."""
        scope, local = split_scope(self.true_name)
        if self.npm_scope != scope or self.name != local:
            raise ValueError(
                f"'{self.true_name}' must split into npm_scope={scope!r} and name={local!r}"
            )
        if self.package_root != self.manifest_path.parent:
            raise ValueError(
                f"package_root {self.package_root} is not the parent of {self.manifest_path}"
            )
        return self


class CargoProfiles(BaseModel):
    """Cargo build profiles; empty for npm workspaces."""
    profiles: Dict[str, Any] = Field(default_factory=dict)


class WorkspaceInfo(BaseModel):
    """The directory scope a set of packages was discovered in."""
    kind: WorkspaceKind
    target_dir: Path
    workspace_dir: Path
    manifest_path: Path
    dist_manifest_path: Optional[Path] = None
    root_auto_includes: AutoIncludes = Field(default_factory=AutoIncludes)
    cargo_metadata_table: Optional[Dict[str, Any]] = None
    cargo_profiles: CargoProfiles = Field(default_factory=CargoProfiles)


class WorkspaceStructure(BaseModel):
    """A workspace and the packages inside it.

    For npm this always holds exactly one package and no sub-workspaces,
    but the list shape is kept so multi-package support fits later.
    """
    sub_workspaces: List["WorkspaceStructure"] = Field(default_factory=list)
    packages: List[PackageInfo]
    workspace: WorkspaceInfo
