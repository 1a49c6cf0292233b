"""
Project locator.

Resolve an identifier to a project directory.

Rules
1) the identifier must be a plain non empty name: no path separators, no
   drive prefix, not "." or ".."
2) candidate roots are tried in configured order, first existing
   root / identifier wins
3) when nothing matches, the operator is asked once for a full path
4) an empty or non existent path ends the run with nothing touched
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from service_decommissioner.core.errors import MissingIdentifier, UnresolvedLocation
from service_decommissioner.interaction.prompt import PromptProvider

logger = logging.getLogger(__name__)

CUSTOM_PATH_QUESTION = (
    "Project not found in common locations. Enter full path (or leave empty to cancel)"
)

_FORBIDDEN_CHARS = ("/", "\\", ":")


@dataclass(frozen=True)
class Location:
    """
    path
    Resolved project path.

    from_root
    True when path is root / identifier for a configured root, False when the
    operator supplied it.
    """

    path: Path
    from_root: bool


def validate_identifier(identifier: str) -> None:
    """
    Raise MissingIdentifier unless identifier is a plain name.

    A candidate is always root / identifier, so the identifier must never be
    able to leave its root.
    """
    if not identifier:
        raise MissingIdentifier("Project name is required")
    if identifier in (".", "..") or any(c in identifier for c in _FORBIDDEN_CHARS):
        raise MissingIdentifier(f"Project name must be a plain name, got {identifier!r}")


class Locator:
    """Find the project directory for an identifier."""

    def __init__(self, search_roots: Sequence[Path], prompt: PromptProvider) -> None:
        self._search_roots = tuple(search_roots)
        self._prompt = prompt

    @property
    def search_roots(self) -> tuple[Path, ...]:
        return self._search_roots

    def find_in_roots(self, identifier: str) -> Path | None:
        """Return the first existing root / identifier, or None."""
        validate_identifier(identifier)
        for root in self._search_roots:
            candidate = root / identifier
            if candidate.exists():
                logger.debug("found %s under %s", identifier, root)
                return candidate
        return None

    def locate(self, identifier: str) -> Location:
        """
        Resolve identifier to a Location.

        Raises MissingIdentifier for an empty or path like identifier and
        UnresolvedLocation when neither the roots nor the operator supplied
        path yield an existing path.
        """
        found = self.find_in_roots(identifier)
        if found is not None:
            return Location(path=found, from_root=True)

        custom = self._prompt.ask(CUSTOM_PATH_QUESTION)
        if not custom:
            raise UnresolvedLocation("no custom path supplied")

        custom_path = Path(custom)
        if not custom_path.exists():
            raise UnresolvedLocation(f"custom path does not exist: {custom_path}")

        return Location(path=custom_path, from_root=False)

    def resolve(self, identifier: str) -> Path:
        """Like locate, returning only the path."""
        return self.locate(identifier).path
