# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from pathlib import Path

from ..domain.errors import (
    ArborError,
    InternalError,
    NotFoundError,
    Step,
    translate_os_errors,
)
from ..domain.results import TreeResult, capture
from ..paths import PathLike, as_path
from ..ports.filesystem import EntryKind, FilesystemPort

logger = logging.getLogger(__name__)


class TreeService:
    """
    Recursive copy / move / delete of directory trees.

      - walks depth-first, entries in the order the listing returns them
      - re-classifies every entry on descent (no stat caching)
      - stops at the first failing entry; work already done is NOT rolled back

    The raising methods are the primitives. The `try_*` variants return a
    TreeResult so a call site has to look at both outcomes.
    """

    def __init__(self, fs: FilesystemPort) -> None:
        self._fs = fs

    # --- helpers ------------------------------------------------------------

    def _require(self, path: Path, what: str) -> None:
        with translate_os_errors(Step.EXISTS, path):
            found = self._fs.exists(path)
        if not found:
            raise NotFoundError(f"{what} not found: {path}", path=path, step=Step.EXISTS)

    def _list(self, path: Path) -> list:
        with translate_os_errors(Step.LIST, path):
            return list(self._fs.list_entries(path))

    def _kind(self, path: Path, follow_symlinks: bool) -> EntryKind:
        # A vanished entry here is an I/O failure, not a precondition failure.
        with translate_os_errors(Step.STAT, path):
            return self._fs.classify(path, follow_symlinks=follow_symlinks)

    # --- copy ---------------------------------------------------------------

    def copy_directory(self, source_root: PathLike, dest_root: PathLike) -> None:
        """
        Replicate `source_root` under `dest_root`, creating `dest_root` and its
        ancestors as needed. Existing destination files are overwritten.

        Raises:
            NotFoundError: `source_root` does not exist (nothing is touched).
            InternalError: `dest_root` is `source_root` or lies inside it
                (nothing is touched), or create/list/stat/copy failed; entries
                processed before the failure stay in place.
        """
        src = as_path(source_root)
        dst = as_path(dest_root)

        self._require(src, "Source directory")

        with translate_os_errors(Step.CREATE, dst):
            src_real, dst_real = src.resolve(), dst.resolve()
        if dst_real == src_real or src_real in dst_real.parents:
            raise InternalError(
                f"Destination {dst} is inside source {src}", path=dst, step=Step.CREATE
            )

        with translate_os_errors(Step.CREATE, dst):
            self._fs.make_directories(dst)

        for name in self._list(src):
            src_path = src / name
            dst_path = dst / name
            if self._kind(src_path, follow_symlinks=True) is EntryKind.DIRECTORY:
                self.copy_directory(src_path, dst_path)
            else:
                logger.debug("copy %s -> %s", src_path, dst_path)
                with translate_os_errors(Step.COPY, src_path):
                    self._fs.copy_file_bytes(src_path, dst_path)

    # --- delete -------------------------------------------------------------

    def delete_directory(self, path: PathLike) -> None:
        """
        Remove `path` and everything beneath it, contents first.

        Symlinks below `path` are unlinked, never descended into. A `path` that
        is itself a symlink or a plain file is refused before anything is removed.

        Raises:
            NotFoundError: `path` does not exist.
            InternalError: `path` is not a real directory, or
                list/stat/unlink/rmdir failed part-way.
        """
        root = as_path(path)
        self._require(root, "Directory")
        if self._kind(root, follow_symlinks=False) is not EntryKind.DIRECTORY:
            raise InternalError(f"Not a directory: {root}", path=root, step=Step.STAT)
        self._delete_tree(root)

    def _delete_tree(self, root: Path) -> None:
        for name in self._list(root):
            entry = root / name
            if self._kind(entry, follow_symlinks=False) is EntryKind.DIRECTORY:
                self._delete_tree(entry)
            else:
                logger.debug("unlink %s", entry)
                with translate_os_errors(Step.UNLINK, entry):
                    self._fs.delete_file(entry)

        logger.debug("rmdir %s", root)
        with translate_os_errors(Step.RMDIR, root):
            self._fs.remove_directory(root)

    # --- move ---------------------------------------------------------------

    def move_directory(self, source_root: PathLike, dest_root: PathLike) -> None:
        """
        copy_directory followed by delete_directory on the source.

        If the copy fails the source is left untouched. If the delete fails the
        tree exists in both places; the delete error is raised and the caller
        may retry delete_directory(source_root).
        """
        self.copy_directory(source_root, dest_root)
        try:
            self.delete_directory(source_root)
        except ArborError:
            logger.warning(
                "move_directory: copied %s to %s but could not remove the source; "
                "tree is now duplicated",
                source_root,
                dest_root,
            )
            raise

    # --- checked variants ---------------------------------------------------

    def try_copy_directory(self, source_root: PathLike, dest_root: PathLike) -> TreeResult:
        return capture(self.copy_directory, source_root, dest_root)

    def try_move_directory(self, source_root: PathLike, dest_root: PathLike) -> TreeResult:
        return capture(self.move_directory, source_root, dest_root)

    def try_delete_directory(self, path: PathLike) -> TreeResult:
        return capture(self.delete_directory, path)
