from .filesystem import EntryKind, FilesystemPort

__all__ = ["EntryKind", "FilesystemPort"]
