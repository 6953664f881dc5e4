from .classifier import EntryClassifier, EntryStat
from .file_service import FileService
from .tree_service import TreeService


__all__ = [
    'EntryClassifier',
    'EntryStat',
    'FileService',
    'TreeService',
]
