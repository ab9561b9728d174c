"""Legacy envelope patches.

Handles historical payload quirks before legacy shapes are upgraded.
"""

from .migrator import LegacyPatch, LegacyPatchRegistry, apply_legacy_patches, get_patch_registry

__all__ = ['LegacyPatch', 'LegacyPatchRegistry', 'apply_legacy_patches', 'get_patch_registry']
