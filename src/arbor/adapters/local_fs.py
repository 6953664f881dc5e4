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

import os
import shutil
import stat as stat_mod
from pathlib import Path
from typing import List

from ..ports.filesystem import EntryKind, FilesystemPort


class LocalFS(FilesystemPort):
    """Local filesystem adapter over os/shutil/pathlib. Errors bubble up as OSError."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def classify(self, path: Path, follow_symlinks: bool = True) -> EntryKind:
        st = os.stat(path, follow_symlinks=follow_symlinks)
        if stat_mod.S_ISDIR(st.st_mode):
            return EntryKind.DIRECTORY
        return EntryKind.FILE

    def stat(self, path: Path) -> dict:
        st = Path(path).stat()
        return {
            "path": str(path),
            "size": st.st_size,
            "mtime_ns": getattr(st, "st_mtime_ns", int(st.st_mtime * 1e9)),
            "is_dir": stat_mod.S_ISDIR(st.st_mode),
        }

    def list_entries(self, path: Path) -> List[str]:
        return os.listdir(path)

    def make_directories(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file_bytes(self, src: Path, dst: Path) -> None:
        # copyfile: contents only, no metadata
        shutil.copyfile(src, dst)

    def delete_file(self, path: Path) -> None:
        Path(path).unlink()

    def remove_directory(self, path: Path) -> None:
        Path(path).rmdir()

    def rename(self, src: Path, dst: Path) -> None:
        os.replace(src, dst)

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")

    def append_text(self, path: Path, content: str) -> None:
        with open(path, "a", encoding="utf-8") as f:
            f.write(content)
