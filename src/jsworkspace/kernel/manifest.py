"""Pydantic model for the generic view of a package.json.

package.json files in the wild are loosely typed, so this model only
insists on the shapes the normalizer relies on and ignores everything else.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

logger = logging.getLogger(__name__)

# node-semver's loose mode: tolerates a leading "v" or "=" and whitespace
_SEMVER_RE = re.compile(
    r"^\s*[v=]?\s*"
    r"(?P<core>\d+\.\d+\.\d+)"
    r"(?P<pre>-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?P<build>\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"\s*$"
)

_HTTP_URL = TypeAdapter(AnyHttpUrl)


class RepositoryObject(BaseModel):
    """The ``{"type": "git", "url": ...}`` form of ``repository``."""
    type: Optional[str] = None
    url: Optional[str] = None
    directory: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class Manifest(BaseModel):
    """The fields of a package.json that describe the package."""
    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    author: Optional[Union[str, Dict[str, Any]]] = None  # "Name <email> (url)" or {"name": ...}
    license: Optional[str] = None
    repository: Optional[Union[str, RepositoryObject]] = None
    homepage: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    scripts: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: Optional[str]) -> Optional[str]:
        """Require a semver version, normalized to ``MAJOR.MINOR.PATCH[-pre][+build]``."""
        if v is None:
            return None
        match = _SEMVER_RE.match(v)
        if match is None:
            raise ValueError(f"'{v}' is not a valid semver version")
        return "".join(part for part in match.group("core", "pre", "build") if part)

    @field_validator("license", mode="before")
    @classmethod
    def collapse_legacy_license(cls, v: Any) -> Any:
        # Deprecated {"type": "MIT", "url": ...} form
        if isinstance(v, dict) and isinstance(v.get("type"), str):
            return v["type"]
        return v

    @field_validator("homepage", mode="before")
    @classmethod
    def drop_invalid_homepage(cls, v: Any) -> Optional[str]:
        """Keep the homepage only if it is an absolute http(s) URL."""
        if v is None:
            return None
        if not isinstance(v, str):
            logger.debug("ignoring non-string homepage %r", v)
            return None
        try:
            _HTTP_URL.validate_python(v)
        except ValidationError:
            logger.debug("ignoring homepage %r, not an http(s) URL", v)
            return None
        return v

    @field_validator("keywords", "scripts", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return [] if info.field_name == "keywords" else {}
        return v
