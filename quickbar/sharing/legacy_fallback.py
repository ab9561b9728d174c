"""Fallback decoding for payloads written before the export envelope existed.

Early versions exported a bare bar or shortcut instead of an envelope. When
envelope decoding fails, the same payload is retried as each legacy
top-level shape in turn; the first match is wrapped in a fresh envelope
stamped with the last version that wrote bare payloads.
"""
from __future__ import annotations

import logging

from ..core.constants import LEGACY_FORMAT_VERSION
from ..core.exceptions import SchemaError
from ..models.legacy import LegacyBar, LegacyShortcut
from .codec import ConfigCodec
from .envelope import ExportEnvelope

logger = logging.getLogger(__name__)


def decode_legacy(payload: str, codec: ConfigCodec) -> ExportEnvelope:
    """Decode decompressed ``payload`` as a legacy bar, else a legacy shortcut.

    Raises:
        SchemaError: If the payload matches neither shape.
    """
    try:
        bar = codec.deserialize(payload, LegacyBar, require_tag=True)
    except SchemaError as bar_error:
        logger.debug(f"Payload is not a legacy bar: {bar_error}")
        try:
            shortcut = codec.deserialize(payload, LegacyShortcut, require_tag=True)
        except SchemaError as shortcut_error:
            logger.debug(f"Payload is not a legacy shortcut: {shortcut_error}")
            raise SchemaError("Payload matches no known legacy shape") from shortcut_error
        logger.info("Recovered legacy shortcut payload")
        return ExportEnvelope(legacy_shortcut=shortcut, format_version=LEGACY_FORMAT_VERSION)

    logger.info("Recovered legacy bar payload")
    return ExportEnvelope(legacy_bar=bar, format_version=LEGACY_FORMAT_VERSION)
