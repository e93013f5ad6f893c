"""Pydantic model for the binary-oriented view of a package.json.

npm accepts three spellings of ``bin``; :meth:`BuildManifest.bin_map` folds
them into one name -> path map.
"""

import logging
import posixpath
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from .package import split_scope

logger = logging.getLogger(__name__)


class Directories(BaseModel):
    """The ``directories`` table; only ``bin`` matters here."""
    bin: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class BuildManifest(BaseModel):
    """Name and binary declarations of a package.json."""
    name: Optional[str] = None
    bin: Optional[Union[str, Dict[str, str], List[str]]] = None
    directories: Optional[Directories] = None

    model_config = ConfigDict(extra="ignore")

    def bin_map(self) -> Dict[str, str]:
        """Return every declared binary as ``{name: path}``.

        - ``"bin": "cli.js"`` is named after the package (scope dropped)
        - ``"bin": {"name": "cli.js"}`` is taken as-is
        - ``"bin": ["cli.js"]`` is named after each file, minus extension

        ``directories.bin`` is expanded into the dict form by the loader,
        since it needs to look at the filesystem.
        """
        bins: Dict[str, str] = {}
        if isinstance(self.bin, str):
            if self.name:
                _, local_name = split_scope(self.name)
                bins[local_name] = self.bin
            else:
                logger.debug("ignoring string bin %r on a nameless package", self.bin)
        elif isinstance(self.bin, dict):
            bins.update(self.bin)
        elif isinstance(self.bin, list):
            for path in self.bin:
                stem, _ = posixpath.splitext(posixpath.basename(path.replace("\\", "/")))
                if stem:
                    bins[stem] = path
        return bins

    def binaries(self) -> List[str]:
        """Declared binary names, unique and in lexicographic order."""
        return sorted(set(self.bin_map()))
