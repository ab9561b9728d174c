"""Export entry points producing shareable import strings."""
from __future__ import annotations

import logging
from typing import Any, Optional

from ..config.settings import ImportSettings, get_settings
from ..core.exceptions import SensitiveExportError
from ..models.bar import BarConfig
from ..models.conditions import ConditionSet
from ..models.shortcut import ShortcutConfig
from .cleaner import clean_bar, clean_shortcut
from .codec import ConfigCodec, get_codec
from .compression import compress_string
from .envelope import ExportEnvelope

logger = logging.getLogger(__name__)


def export_object(obj: Any, full: bool = False, codec: Optional[ConfigCodec] = None) -> str:
    """Serialize ``obj`` and wrap it in the compression envelope."""
    text = (codec or get_codec()).serialize(obj, full)
    return compress_string(text)


def export_bar(bar: BarConfig, full: bool = False, codec: Optional[ConfigCodec] = None) -> str:
    """Export a bar.

    Compact exports clean a clone of ``bar``; full exports write it untouched.
    """
    codec = codec or get_codec()
    if not full:
        bar = clean_bar(codec.clone(bar))
    result = export_object(ExportEnvelope(bar=bar), full, codec)
    logger.debug(f"Exported bar '{bar.name}' ({'full' if full else 'compact'}, {len(result)} chars)")
    return result


def export_shortcut(sh: ShortcutConfig, full: bool = False, codec: Optional[ConfigCodec] = None) -> str:
    """Export a shortcut and its subtree.

    Compact exports clean a clone of ``sh``; full exports write it untouched.
    """
    codec = codec or get_codec()
    if not full:
        sh = clean_shortcut(codec.clone(sh))
    result = export_object(ExportEnvelope(shortcut=sh), full, codec)
    logger.debug(f"Exported shortcut '{sh.name}' ({'full' if full else 'compact'}, {len(result)} chars)")
    return result


def export_condition_set(condition_set: ConditionSet, full: bool = False,
                         settings: Optional[ImportSettings] = None,
                         codec: Optional[ConfigCodec] = None) -> str:
    """Export a condition set.

    Raises:
        SensitiveExportError: If the set holds sensitive conditions and
            ``allow_exporting_sensitive_condition_sets`` is off.
    """
    settings = settings or get_settings()
    if condition_set.is_sensitive() and not settings.allow_exporting_sensitive_condition_sets:
        raise SensitiveExportError(
            f"Condition set '{condition_set.name}' contains sensitive conditions; "
            "enable \"Allow exporting sensitive condition sets\" to share it"
        )
    return export_object(ExportEnvelope(condition_set=condition_set), full, codec)
