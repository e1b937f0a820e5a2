"""Template materialization: tree copy and manifest patching."""

from pandagen.core.materialize.copier import (
    RENAME_FILES,
    CopyVerbatim,
    WriteContent,
    copy,
    empty_dir,
    is_empty,
    materialize_template,
    write_entry,
)
from pandagen.core.materialize.manifest import MANIFEST_FILE, patch_manifest, read_manifest, resolve_package_name

__all__ = [
    "MANIFEST_FILE",
    "RENAME_FILES",
    "CopyVerbatim",
    "WriteContent",
    "copy",
    "empty_dir",
    "is_empty",
    "materialize_template",
    "patch_manifest",
    "read_manifest",
    "resolve_package_name",
    "write_entry",
]
