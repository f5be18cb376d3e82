# SPDX-License-Identifier: MIT
"""Static release registry for VTubersTV public versions.

The registry is the source of approved release themes. It is built once,
either from the builtin version history or from a JSON file, and is never
mutated afterwards, so it can be shared freely between threads.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Optional

from jsonschema import Draft202012Validator, ValidationError

from .semver import SEMVER_PATTERN

logger = logging.getLogger(__name__)

RELEASE_STATUSES = ("alpha", "beta", "rc", "stable", "deprecated")

_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}\Z"

# JSON Schema for a registry file: a list of release entries
REGISTRY_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "VTubersTV Release Registry",
    "type": "array",
    "items": {
        "type": "object",
        "required": [
            "internalVersion",
            "publicVersion",
            "releaseDate",
            "theme",
            "status",
            "securityUpdates",
        ],
        "properties": {
            "internalVersion": {"type": "string"},
            "publicVersion": {
                "type": "string",
                # Same grammar as the public version parser
                "pattern": r"^[A-Z][a-zA-Z]+-[0-9]+\.[0-9]+(?:-(alpha|beta|rc))?\Z",
            },
            "releaseDate": {"type": "string", "pattern": _DATE_PATTERN},
            "theme": {
                "type": "object",
                "required": ["name", "description", "color"],
                "properties": {
                    "name": {"type": "string", "pattern": r"^[A-Z][a-zA-Z]+\Z"},
                    "description": {"type": "string"},
                    "color": {"type": "string", "pattern": r"^#[0-9a-fA-F]{6}\Z"},
                    "inspiration": {"type": "string"},
                },
                "additionalProperties": False,
            },
            "status": {"enum": list(RELEASE_STATUSES)},
            "deprecationDate": {"type": "string", "pattern": _DATE_PATTERN},
            "securityUpdates": {"type": "boolean"},
        },
        "additionalProperties": False,
    },
}


class RegistryError(Exception):
    """Raised when a registry file cannot be loaded.

    Attributes:
        errors: List of "field: message" strings describing each problem
    """

    def __init__(self, message: str, errors: Optional[list[str]] = None):
        self.errors = errors or []
        if self.errors:
            message += ": " + "; ".join(self.errors)
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class ReleaseTheme:
    """Descriptor of a release theme.

    Attributes:
        name: Theme name used as the public version prefix (e.g. "Aurora")
        description: Short description of the release
        color: Hex colour associated with the theme
        inspiration: Optional source of the theme name
    """

    name: str
    description: str
    color: str
    inspiration: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PublicVersionData:
    """A single entry of the release registry."""

    internal_version: str
    public_version: str
    release_date: str
    theme: ReleaseTheme
    status: str
    deprecation_date: Optional[str] = None
    security_updates: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PublicVersionData":
        """Create an entry from its JSON (camelCase) representation."""
        theme = data["theme"]
        return cls(
            internal_version=data["internalVersion"],
            public_version=data["publicVersion"],
            release_date=data["releaseDate"],
            theme=ReleaseTheme(
                name=theme["name"],
                description=theme["description"],
                color=theme["color"],
                inspiration=theme.get("inspiration"),
            ),
            status=data["status"],
            deprecation_date=data.get("deprecationDate"),
            security_updates=data["securityUpdates"],
        )


@dataclass(frozen=True)
class ReleaseRegistry:
    """Read-only table of known releases.

    Attributes:
        entries: Release entries in registry order
        approved_themes: Theme names of all entries, in first-seen order
    """

    entries: tuple[PublicVersionData, ...]
    approved_themes: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        themes = dict.fromkeys(entry.theme.name for entry in self.entries)
        object.__setattr__(self, "approved_themes", tuple(themes))

    @classmethod
    def from_entries(cls, entries: Iterable[PublicVersionData]) -> "ReleaseRegistry":
        return cls(tuple(entries))

    def get_version_data(self, public_version: str) -> Optional[PublicVersionData]:
        """Get the entry for a public version string such as "Aurora-1.0"."""
        for entry in self.entries:
            if entry.public_version == public_version:
                return entry
        return None

    def get_version_by_internal(self, internal_version: str) -> Optional[PublicVersionData]:
        """Get the entry for an internal semantic version string."""
        for entry in self.entries:
            if entry.internal_version == internal_version:
                return entry
        return None

    def get_versions_by_status(self, status: str) -> list[PublicVersionData]:
        """Get all entries with the given status.

        Raises:
            ValueError: If status is not a known release status
        """
        if status not in RELEASE_STATUSES:
            raise ValueError(
                f"Unknown release status {status!r}, expected one of: {', '.join(RELEASE_STATUSES)}"
            )
        return [entry for entry in self.entries if entry.status == status]

    def get_latest_stable_version(self) -> Optional[PublicVersionData]:
        """Get the most recently released stable entry."""
        stable = self.get_versions_by_status("stable")
        if not stable:
            return None
        return max(stable, key=lambda entry: date.fromisoformat(entry.release_date))


VERSION_HISTORY: tuple[PublicVersionData, ...] = (
    PublicVersionData(
        internal_version="1.0.0",
        public_version="Aurora-1.0",
        release_date="2024-01-15",
        theme=ReleaseTheme(
            name="Aurora",
            description="The first version of VTubersTV",
            color="#7B68EE",
            inspiration="Northern Lights",
        ),
        status="stable",
        security_updates=True,
    ),
)

DEFAULT_REGISTRY = ReleaseRegistry(VERSION_HISTORY)

APPROVED_THEMES: tuple[str, ...] = DEFAULT_REGISTRY.approved_themes


def _error_path(error: ValidationError) -> str:
    if not error.absolute_path:
        return "<root>"
    parts = []
    for part in error.absolute_path:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts)


def validate_registry_data(data: Any) -> list[str]:
    """Validate parsed registry JSON, returning a list of problems."""
    validator = Draft202012Validator(REGISTRY_SCHEMA)
    problems = [f"{_error_path(error)}: {error.message}" for error in validator.iter_errors(data)]
    if problems:
        return problems

    for index, entry in enumerate(data):
        if not SEMVER_PATTERN.fullmatch(entry["internalVersion"]):
            problems.append(
                f"[{index}].internalVersion: {entry['internalVersion']!r} is not a valid semantic version"
            )

        for key in ("releaseDate", "deprecationDate"):
            if key not in entry:
                continue
            try:
                date.fromisoformat(entry[key])
            except ValueError as e:
                problems.append(f"[{index}].{key}: {entry[key]!r} is not a valid date ({e})")

        theme_name = entry["theme"]["name"]
        if not entry["publicVersion"].startswith(f"{theme_name}-"):
            problems.append(
                f"[{index}].publicVersion: '{entry['publicVersion']}' does not use theme '{theme_name}'"
            )
    return problems


def load_registry(path: str | Path) -> ReleaseRegistry:
    """Load a release registry from a JSON file.

    Args:
        path: Path to a JSON file containing a list of release entries

    Returns:
        The loaded ReleaseRegistry

    Raises:
        RegistryError: If the file is missing or unreadable, is not UTF-8
            JSON, or fails validation
    """
    registry_path = Path(path)
    logger.debug("Loading release registry from %s", registry_path)

    try:
        data = json.loads(registry_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise RegistryError(f"Registry file not found: {registry_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Cannot read registry {registry_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RegistryError(f"Invalid JSON in registry {registry_path}: {e}") from e

    problems = validate_registry_data(data)
    if problems:
        raise RegistryError(f"Invalid registry {registry_path}", problems)

    registry = ReleaseRegistry.from_entries(PublicVersionData.from_dict(item) for item in data)
    logger.debug(
        "Loaded %d release(s), approved themes: %s",
        len(registry.entries),
        ", ".join(registry.approved_themes),
    )
    return registry
