"""Historical patches applied to import envelopes before upgrade.

Old plugin versions wrote payloads with quirks that the current decoder
reads without complaint but the upgrade step would carry over verbatim.
Each :class:`LegacyPatch` fixes one such quirk for every envelope written
by a version older than the patch.

Patches only touch the legacy slots of an envelope; whether a payload is
legacy at all is decided by which slot it landed in, not by its version.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from ...core.exceptions import MigrationError
from ...models.legacy import LegacyShortcut, LegacyShortcutType
from ...models.tree import walk_shortcuts
from ..types import FormatVersion

if TYPE_CHECKING:
    from ...sharing.envelope import ExportEnvelope

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LegacyPatch:
    """Represents a single envelope patch."""
    version: FormatVersion
    description: str
    patch_func: Callable[["ExportEnvelope"], None]


class LegacyPatchRegistry:
    """Ordered collection of envelope patches."""

    def __init__(self):
        self._patches: List[LegacyPatch] = []

    def register(self, patch: LegacyPatch) -> None:
        """Register a patch, keeping the list sorted by version."""
        self._patches.append(patch)
        self._patches.sort(key=lambda p: p.version)
        logger.debug(f"Registered legacy patch {patch.version}: {patch.description}")

    def get_patches(self) -> List[LegacyPatch]:
        return self._patches.copy()

    def pending_for(self, version: FormatVersion) -> List[LegacyPatch]:
        """Patches newer than ``version``, oldest first."""
        return [p for p in self._patches if version < p.version]

    def apply(self, envelope: "ExportEnvelope") -> "ExportEnvelope":
        """Apply every pending patch to ``envelope`` in place.

        Raises:
            MigrationError: If a patch fails.
        """
        version = FormatVersion.parse_lenient(envelope.format_version)
        for patch in self.pending_for(version):
            logger.info(f"Applying legacy patch {patch.version} to envelope {version}: {patch.description}")
            try:
                patch.patch_func(envelope)
            except Exception as e:
                raise MigrationError(f"Legacy patch {patch.version} failed: {e}") from e
        return envelope


def _legacy_roots(envelope: "ExportEnvelope") -> List[LegacyShortcut]:
    roots: List[LegacyShortcut] = []
    if envelope.legacy_bar is not None:
        roots.extend(envelope.legacy_bar.shortcut_list)
    if envelope.legacy_shortcut is not None:
        roots.append(envelope.legacy_shortcut)
    return roots


def normalize_multiline_commands(envelope: "ExportEnvelope") -> None:
    """Multiline shortcuts were saved with Windows line endings."""
    def visit(sh: LegacyShortcut) -> None:
        if sh.type == LegacyShortcutType.MULTILINE_DEPRECATED:
            sh.command = sh.command.replace("\r\n", "\n")

    walk_shortcuts(_legacy_roots(envelope), visit)


def _register_builtin_patches(registry: LegacyPatchRegistry) -> None:
    registry.register(LegacyPatch(
        version=FormatVersion.from_string("2.0.0.0"),
        description="Normalize line endings of deprecated multiline shortcuts",
        patch_func=normalize_multiline_commands,
    ))


# Global instance for easy access
_registry_instance: Optional[LegacyPatchRegistry] = None


def get_patch_registry() -> LegacyPatchRegistry:
    """Get the global patch registry, with the built-in patches registered."""
    global _registry_instance
    if _registry_instance is None:
        _registry_instance = LegacyPatchRegistry()
        _register_builtin_patches(_registry_instance)
    return _registry_instance


def apply_legacy_patches(envelope: "ExportEnvelope",
                         registry: Optional[LegacyPatchRegistry] = None) -> "ExportEnvelope":
    """Apply historical patches to a freshly decoded envelope."""
    return (registry or get_patch_registry()).apply(envelope)


__all__ = [
    'LegacyPatch', 'LegacyPatchRegistry', 'get_patch_registry',
    'apply_legacy_patches', 'normalize_multiline_commands'
]
