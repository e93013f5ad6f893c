"""README/LICENSE/CHANGELOG discovery and merging (internal)."""

import logging
from pathlib import Path

from jsworkspace.errors import AutoIncludeError
from jsworkspace.kernel.package import AutoIncludes, PackageInfo

logger = logging.getLogger(__name__)

README_PREFIXES = ("README",)
LICENSE_PREFIXES = ("LICENSE", "UNLICENSE")
CHANGELOG_PREFIXES = ("CHANGELOG", "RELEASES")


def find_auto_includes(directory: Path) -> AutoIncludes:
    """Look for auxiliary files directly inside ``directory``.

    Only regular files are considered, in name order, so the result is
    stable. The first README and CHANGELOG win; every LICENSE is kept.
    """
    includes = AutoIncludes()
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise AutoIncludeError(directory, str(e)) from e

    for entry in entries:
        if not entry.is_file():
            continue
        name = entry.name
        if name.startswith(README_PREFIXES):
            if includes.readme is None:
                includes.readme = entry
        elif name.startswith(LICENSE_PREFIXES):
            includes.licenses.append(entry)
        elif name.startswith(CHANGELOG_PREFIXES):
            if includes.changelog is None:
                includes.changelog = entry

    logger.debug(
        "auto-includes in %s: readme=%s licenses=%d changelog=%s",
        directory, includes.readme, len(includes.licenses), includes.changelog,
    )
    return includes


def merge_auto_includes(info: PackageInfo, includes: AutoIncludes) -> None:
    """Fill in auxiliary files the package doesn't already declare (in place)."""
    if info.readme_file is None:
        info.readme_file = includes.readme
    if not info.license_files:
        info.license_files = list(includes.licenses)
    if info.changelog_file is None:
        info.changelog_file = includes.changelog
