"""Import pipeline for shared configuration strings.

``try_import`` runs one import string through every stage in order:

1. decompress and decode the export envelope, falling back to the legacy
   bare-object shapes when the envelope does not match;
2. apply historical patches and upgrade legacy shapes to the current model;
3. strip the bar's condition set unless conditions may be imported;
4. strip hotkeys from the bar and every shortcut unless hotkeys may be
   imported.

Any failure ends the import with an empty result. Nothing is raised to the
caller; with diagnostics requested the failure and every policy advisory
are reported as :class:`Diagnostic` messages.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from ..config.migrations.migrator import LegacyPatchRegistry, apply_legacy_patches
from ..config.settings import ImportSettings, get_settings
from ..core.exceptions import SchemaError
from ..core.logging_config import CorrelationContext
from ..models.bar import BarConfig
from ..models.base import is_default, reset_to_default
from ..models.shortcut import ShortcutConfig
from ..models.tree import walk_shortcuts
from .codec import ConfigCodec, get_codec
from .compression import decompress_string
from .diagnostics import (
    CONDITION_ADVISORY, HOTKEY_ADVISORY, PIE_ADVISORY,
    Diagnostic, Severity, describe_import_error
)
from .envelope import ExportEnvelope, ImportResult
from .legacy_fallback import decode_legacy

logger = logging.getLogger(__name__)

Notifier = Callable[[Diagnostic], None]


def decode_envelope(text: str, codec: Optional[ConfigCodec] = None) -> ExportEnvelope:
    """Decode an import string into an envelope, trying legacy shapes on mismatch.

    Raises:
        DecodeError: If the string is not a valid compressed payload.
        SchemaError: If the payload matches neither the envelope nor a legacy shape.
    """
    codec = codec or get_codec()
    payload = decompress_string(text)
    try:
        envelope = codec.deserialize(payload, ExportEnvelope, require_tag=True)
        if not envelope.has_payload():
            raise SchemaError("Envelope does not contain an importable object")
        return envelope
    except SchemaError as envelope_error:
        logger.debug(f"Envelope decoding failed, trying legacy shapes: {envelope_error}")
        try:
            return decode_legacy(payload, codec)
        except SchemaError:
            raise envelope_error


def upgrade_legacy(envelope: ExportEnvelope) -> ExportEnvelope:
    """Move a legacy bar or shortcut into the matching current slot."""
    if envelope.legacy_bar is not None:
        envelope.bar = envelope.legacy_bar.upgrade()
        envelope.legacy_bar = None
        logger.info(f"Upgraded legacy bar '{envelope.bar.name}'")
    elif envelope.legacy_shortcut is not None:
        envelope.shortcut = envelope.legacy_shortcut.upgrade()
        envelope.legacy_shortcut = None
        logger.info(f"Upgraded legacy shortcut '{envelope.shortcut.name}'")
    return envelope


def strip_conditions(bar: BarConfig) -> bool:
    """Reset the bar's condition set; True if one was actually removed."""
    if is_default(bar, "condition_set"):
        return False
    reset_to_default(bar, "condition_set")
    return True


def strip_hotkeys(bar: Optional[BarConfig], shortcut: Optional[ShortcutConfig]) -> Tuple[bool, bool]:
    """Remove hotkeys from a bar's tree and from a standalone shortcut.

    Returns:
        ``(hotkey_removed, pie_removed)``. A hotkey on the bar itself makes
        it a pie, so removing it raises both flags.
    """
    hotkey_removed = False
    pie_removed = False

    def visit(sh: ShortcutConfig) -> None:
        nonlocal hotkey_removed
        if not is_default(sh, "hotkey"):
            hotkey_removed = True
        reset_to_default(sh, "hotkey", "key_passthrough")

    if bar is not None:
        if not is_default(bar, "hotkey"):
            reset_to_default(bar, "hotkey")
            hotkey_removed = pie_removed = True
        walk_shortcuts(bar.shortcut_list, visit)

    if shortcut is not None:
        walk_shortcuts([shortcut], visit)

    return hotkey_removed, pie_removed


def _report(result: ImportResult, diagnostic: Diagnostic, notify: Optional[Notifier]) -> None:
    result.messages.append(diagnostic)
    if diagnostic.severity is Severity.ERROR:
        logger.error(diagnostic.message)
    else:
        logger.info(diagnostic.message)
    if notify is not None:
        notify(diagnostic)


def try_import(text: str, want_diagnostics: bool = False,
               settings: Optional[ImportSettings] = None,
               codec: Optional[ConfigCodec] = None,
               patches: Optional[LegacyPatchRegistry] = None,
               notify: Optional[Notifier] = None) -> ImportResult:
    """Import a shared string into current-generation configuration objects.

    Args:
        text: Import string as produced by the export functions
        want_diagnostics: Report failures and policy advisories as messages
        settings: Import policy; the process-wide settings when omitted
        codec: Codec to decode with; the global codec when omitted
        patches: Legacy patch registry; the global registry when omitted
        notify: Called with every diagnostic when diagnostics are requested

    Returns:
        ImportResult: Empty (``success`` False) if the string could not be imported.
    """
    settings = settings or get_settings()
    codec = codec or get_codec()

    with CorrelationContext():
        result = ImportResult()
        try:
            envelope = decode_envelope(text, codec)
            apply_legacy_patches(envelope, patches)
            upgrade_legacy(envelope)

            condition_removed = False
            if not settings.allow_import_conditions and envelope.bar is not None:
                condition_removed = strip_conditions(envelope.bar)

            hotkey_removed = pie_removed = False
            if not settings.allow_import_hotkeys:
                hotkey_removed, pie_removed = strip_hotkeys(envelope.bar, envelope.shortcut)
        except Exception as e:
            if want_diagnostics:
                logger.debug("Import failed", exc_info=True)
                _report(result, Diagnostic(Severity.ERROR, describe_import_error(e)), notify)
            else:
                logger.debug(f"Import failed: {e}")
            return result

        result.bar = envelope.bar
        result.shortcut = envelope.shortcut
        result.condition_set = envelope.condition_set
        result.success = True
        result.condition_removed = condition_removed
        result.hotkey_removed = hotkey_removed
        result.pie_removed = pie_removed

        if want_diagnostics:
            if condition_removed:
                _report(result, Diagnostic(Severity.ADVISORY, CONDITION_ADVISORY), notify)
            if hotkey_removed:
                _report(result, Diagnostic(Severity.ADVISORY, HOTKEY_ADVISORY), notify)
            if pie_removed:
                _report(result, Diagnostic(Severity.ADVISORY, PIE_ADVISORY), notify)

        logger.info(f"Imported envelope v{envelope.format_version}: "
                    f"bar={result.bar is not None}, shortcut={result.shortcut is not None}, "
                    f"condition_set={result.condition_set is not None}")
        return result


def import_bar(text: str, settings: Optional[ImportSettings] = None) -> Optional[BarConfig]:
    """Import a string expected to hold a bar; None if it holds none."""
    return try_import(text, settings=settings).bar


def import_shortcut(text: str, settings: Optional[ImportSettings] = None) -> Optional[ShortcutConfig]:
    """Import a string expected to hold a shortcut; None if it holds none."""
    return try_import(text, settings=settings).shortcut
