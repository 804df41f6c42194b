"""File action engine: clipboard, tree walking, batches and edited lists."""

from fsclip.engine.clipboard import Clipboard, SortOrder
from fsclip.engine.conflict import ConflictResolver, Resolution
from fsclip.engine.editor import (
    CommitOutcome,
    CommitStatus,
    EditMode,
    EditSession,
    SnapshotDiffEditor,
    SurfaceRegistry,
    parse_edited_lines,
)
from fsclip.engine.executor import BatchExecutor
from fsclip.engine.interaction import Prompter, Reporter, ask, ask_yes_no
from fsclip.engine.materializer import CreatedPathInfo, ensure_parent_dirs
from fsclip.engine.metadata import (
    MetadataReport,
    MetadataSnapshot,
    PathKind,
    describe,
    format_permissions,
    format_size,
    read_metadata,
)
from fsclip.engine.references import NullReferences, ReferenceNotifier, ReferenceRegistry
from fsclip.engine.session import Session
from fsclip.engine.walker import copy_tree, delete_tree

__all__ = [
    "BatchExecutor",
    "Clipboard",
    "CommitOutcome",
    "CommitStatus",
    "ConflictResolver",
    "CreatedPathInfo",
    "EditMode",
    "EditSession",
    "MetadataReport",
    "MetadataSnapshot",
    "NullReferences",
    "PathKind",
    "Prompter",
    "ReferenceNotifier",
    "ReferenceRegistry",
    "Reporter",
    "Resolution",
    "Session",
    "SnapshotDiffEditor",
    "SortOrder",
    "SurfaceRegistry",
    "ask",
    "ask_yes_no",
    "copy_tree",
    "delete_tree",
    "describe",
    "ensure_parent_dirs",
    "format_permissions",
    "format_size",
    "parse_edited_lines",
]
