"""Tests for the package.json pydantic views (manifest.py, build_manifest.py)."""

import pytest
from pydantic import ValidationError

from jsworkspace.kernel.build_manifest import BuildManifest
from jsworkspace.kernel.manifest import Manifest, RepositoryObject


def test_manifest_minimal():
    """Every field is optional; collections default to empty."""
    manifest = Manifest.model_validate({})
    assert manifest.name is None
    assert manifest.version is None
    assert manifest.keywords == []
    assert manifest.scripts == {}


def test_manifest_ignores_unknown_fields():
    manifest = Manifest.model_validate({
        "name": "pkg",
        "dependencies": {"left-pad": "^1.0.0"},
        "private": True,
    })
    assert manifest.name == "pkg"


def test_manifest_loose_semver_is_normalized():
    """Leading 'v' and whitespace are tolerated like node-semver's loose mode."""
    assert Manifest.model_validate({"version": " v1.2.3 "}).version == "1.2.3"
    assert Manifest.model_validate({"version": "1.0.0-beta.1+build.5"}).version == "1.0.0-beta.1+build.5"


@pytest.mark.parametrize("version", ["1.2", "latest", "01.x.0", ""])
def test_manifest_rejects_invalid_semver(version):
    with pytest.raises(ValidationError, match="not a valid semver"):
        Manifest.model_validate({"version": version})


def test_manifest_author_shapes():
    """Authors may be a string or an object; anything else is invalid."""
    assert Manifest.model_validate({"author": "Jane <jane@example.com>"}).author == "Jane <jane@example.com>"
    assert Manifest.model_validate({"author": {"name": "Jane"}}).author == {"name": "Jane"}
    with pytest.raises(ValidationError):
        Manifest.model_validate({"author": 42})


def test_manifest_repository_shapes():
    shorthand = Manifest.model_validate({"repository": "owner/repo"})
    assert shorthand.repository == "owner/repo"

    obj = Manifest.model_validate({"repository": {"type": "git", "url": "https://example.com/r.git"}})
    assert isinstance(obj.repository, RepositoryObject)
    assert obj.repository.url == "https://example.com/r.git"


def test_manifest_legacy_license_object():
    manifest = Manifest.model_validate({"license": {"type": "MIT", "url": "https://opensource.org/licenses/MIT"}})
    assert manifest.license == "MIT"


def test_manifest_homepage_is_best_effort():
    """Homepages that aren't http(s) URLs are dropped, not rejected."""
    assert Manifest.model_validate({"homepage": "https://example.com/docs"}).homepage == "https://example.com/docs"
    assert Manifest.model_validate({"homepage": "not a url"}).homepage is None
    assert Manifest.model_validate({"homepage": 7}).homepage is None


def test_manifest_null_collections():
    manifest = Manifest.model_validate({"keywords": None, "scripts": None})
    assert manifest.keywords == []
    assert manifest.scripts == {}


def test_manifest_wrong_scripts_type():
    with pytest.raises(ValidationError):
        Manifest.model_validate({"scripts": ["build"]})


def test_build_manifest_string_bin_uses_unscoped_name():
    build = BuildManifest.model_validate({"name": "@acme/tool", "bin": "./cli.js"})
    assert build.bin_map() == {"tool": "./cli.js"}


def test_build_manifest_string_bin_without_name():
    build = BuildManifest.model_validate({"bin": "./cli.js"})
    assert build.bin_map() == {}


def test_build_manifest_object_bin():
    build = BuildManifest.model_validate({"bin": {"zeta": "z.js", "alpha": "a.js"}})
    assert build.bin_map() == {"zeta": "z.js", "alpha": "a.js"}
    assert build.binaries() == ["alpha", "zeta"]


def test_build_manifest_array_bin():
    """Array entries are named after the file without its extension."""
    build = BuildManifest.model_validate({"bin": ["bin/serve.js", "bin\\lint.mjs", "bin/serve.cjs"]})
    assert build.binaries() == ["lint", "serve"]


def test_build_manifest_no_bins():
    assert BuildManifest.model_validate({"name": "pkg"}).binaries() == []


def test_build_manifest_rejects_bad_bin():
    with pytest.raises(ValidationError):
        BuildManifest.model_validate({"bin": {"tool": 3}})
    with pytest.raises(ValidationError):
        BuildManifest.model_validate({"bin": 12})
