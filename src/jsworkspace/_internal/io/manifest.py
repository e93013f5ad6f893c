"""package.json I/O helpers (internal)."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from jsworkspace.errors import BuildInfoParseError, ManifestParseError, ManifestReadError
from jsworkspace.kernel.build_manifest import BuildManifest
from jsworkspace.kernel.manifest import Manifest

logger = logging.getLogger(__name__)


def _summarize(error: ValidationError) -> str:
    """One line per pydantic error, e.g. ``bin: Input should be a valid string``."""
    lines = []
    for item in error.errors():
        loc = ".".join(str(part) for part in item["loc"]) or "<root>"
        lines.append(f"{loc}: {item['msg']}")
    return "; ".join(lines)


def read_document(manifest_path: Path) -> Dict[str, Any]:
    """Read a package.json and decode it into a dict.

    Raises:
        ManifestReadError: if the file can't be read
        ManifestParseError: if it isn't a JSON object
    """
    try:
        text = manifest_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(manifest_path, str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(
            manifest_path, f"{e.msg} at line {e.lineno} column {e.colno}"
        ) from e

    if not isinstance(data, dict):
        raise ManifestParseError(
            manifest_path, f"expected a JSON object, found {type(data).__name__}"
        )
    return data


def load_manifest(manifest_path: Path) -> Manifest:
    """Load the generic (metadata) view of a package.json."""
    data = read_document(manifest_path)
    try:
        return Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestParseError(manifest_path, _summarize(e)) from e


def load_build_manifest(manifest_path: Path) -> BuildManifest:
    """Load the binary-declaration view of a package.json.

    Reads the file again on its own; any failure is reported as a
    BuildInfoParseError so it can be told apart from a bad manifest.
    """
    try:
        data = read_document(manifest_path)
        build_manifest = BuildManifest.model_validate(data)
    except (ManifestReadError, ManifestParseError) as e:
        raise BuildInfoParseError(manifest_path, e.details) from e
    except ValidationError as e:
        raise BuildInfoParseError(manifest_path, _summarize(e)) from e

    if build_manifest.bin is None and build_manifest.directories and build_manifest.directories.bin:
        try:
            bins = _scan_bin_dir(manifest_path.parent, build_manifest.directories.bin)
        except OSError as e:
            raise BuildInfoParseError(manifest_path, f"failed to scan directories.bin: {e}") from e
        except ValueError as e:
            raise BuildInfoParseError(manifest_path, str(e)) from e
        build_manifest = build_manifest.model_copy(update={"bin": bins})
    return build_manifest


def _scan_bin_dir(package_root: Path, bin_dir_name: str) -> Dict[str, str]:
    """Every file under ``directories.bin`` becomes a binary named after the file.

    Raises:
        ValueError: if ``directories.bin`` points outside the package root
    """
    package_root = package_root.resolve()
    bin_dir = (package_root / bin_dir_name).resolve()
    if bin_dir != package_root and package_root not in bin_dir.parents:
        raise ValueError(f"directories.bin {bin_dir_name!r} is outside of {package_root}")
    if not bin_dir.is_dir():
        logger.debug("directories.bin %s is not a directory, no binaries", bin_dir)
        return {}
    bins: Dict[str, str] = {}
    for entry in sorted(bin_dir.rglob("*")):
        if entry.is_file():
            bins[entry.name] = entry.relative_to(package_root).as_posix()
    return bins
