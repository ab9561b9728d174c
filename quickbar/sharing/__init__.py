"""Import/export of bars, shortcuts and condition sets as shareable strings."""

from .cleaner import clean_bar, clean_shortcut
from .codec import ConfigCodec, clone, get_codec
from .compression import compress_string, decompress_string
from .diagnostics import Diagnostic, Severity
from .envelope import ExportEnvelope, ImportResult
from .exporter import export_bar, export_condition_set, export_object, export_shortcut
from .importer import import_bar, import_shortcut, try_import
from .registry import TypeRegistry, get_type_registry

__all__ = [
    "clean_bar", "clean_shortcut",
    "ConfigCodec", "clone", "get_codec",
    "compress_string", "decompress_string",
    "Diagnostic", "Severity",
    "ExportEnvelope", "ImportResult",
    "export_bar", "export_condition_set", "export_object", "export_shortcut",
    "import_bar", "import_shortcut", "try_import",
    "TypeRegistry", "get_type_registry",
]
