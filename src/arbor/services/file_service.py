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

import json
import logging
from pathlib import Path
from typing import Any, List

from ..domain.errors import NotFoundError, Step, ValidationError, translate_os_errors
from ..paths import PathLike, as_path
from ..ports.filesystem import EntryKind, FilesystemPort
from .classifier import EntryClassifier, EntryStat

logger = logging.getLogger(__name__)


class FileService:
    """
    Leaf operations on single files and directory listings.

    Every missing-path precondition raises NotFoundError; any other OS failure
    surfaces as InternalError carrying the path and step.
    """

    def __init__(self, fs: FilesystemPort) -> None:
        self._fs = fs
        self._classifier = EntryClassifier(fs)

    def _exists(self, path: Path) -> bool:
        with translate_os_errors(Step.EXISTS, path):
            return self._fs.exists(path)

    def _require(self, path: Path, what: str = "File") -> None:
        if not self._exists(path):
            raise NotFoundError(f"{what} not found: {path}", path=path, step=Step.EXISTS)

    @staticmethod
    def _check_text(content: Any) -> None:
        if not isinstance(content, str):
            raise ValidationError(
                f"Content must be a string, got {type(content).__name__}"
            )

    def exists(self, path: PathLike) -> bool:
        return self._exists(as_path(path))

    def read_file(self, path: PathLike) -> str:
        """
        Raises:
            NotFoundError: the file does not exist.
            ValidationError: the file is not valid UTF-8.
        """
        p = as_path(path)
        self._require(p)
        try:
            with translate_os_errors(Step.READ, p):
                return self._fs.read_text(p)
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"File is not valid UTF-8: {p}", path=p, step=Step.READ
            ) from e

    def write_file(self, path: PathLike, content: str) -> None:
        self._check_text(content)
        p = as_path(path)
        try:
            with translate_os_errors(Step.WRITE, p):
                self._fs.write_text(p, content)
        except UnicodeEncodeError as e:
            raise ValidationError(
                f"Content cannot be encoded as UTF-8: {p}", path=p, step=Step.WRITE
            ) from e

    def append_to_file(self, path: PathLike, content: str) -> None:
        self._check_text(content)
        p = as_path(path)
        try:
            with translate_os_errors(Step.APPEND, p):
                self._fs.append_text(p, content)
        except UnicodeEncodeError as e:
            raise ValidationError(
                f"Content cannot be encoded as UTF-8: {p}", path=p, step=Step.APPEND
            ) from e

    def delete_file(self, path: PathLike) -> None:
        p = as_path(path)
        self._require(p)
        with translate_os_errors(Step.UNLINK, p):
            self._fs.delete_file(p)

    def copy_file(self, src: PathLike, dst: PathLike) -> None:
        s, d = as_path(src), as_path(dst)
        self._require(s, "Source file")
        with translate_os_errors(Step.COPY, s):
            self._fs.copy_file_bytes(s, d)

    def move_file(self, src: PathLike, dst: PathLike) -> None:
        s, d = as_path(src), as_path(dst)
        self._require(s, "Source file")
        with translate_os_errors(Step.RENAME, s):
            self._fs.rename(s, d)

    def create_directory(self, path: PathLike) -> None:
        p = as_path(path)
        if self._exists(p):
            return
        with translate_os_errors(Step.CREATE, p):
            self._fs.make_directories(p)
        logger.debug("Created directory: %s", p)

    def read_directory(self, path: PathLike) -> List[str]:
        p = as_path(path)
        self._require(p, "Directory")
        with translate_os_errors(Step.LIST, p):
            return list(self._fs.list_entries(p))

    def list_files_in_directory(self, path: PathLike) -> List[str]:
        p = as_path(path)
        names = []
        for name in self.read_directory(p):
            try:
                kind = self._classifier.classify(p / name)
            except NotFoundError:
                # dangling symlink, or removed since the listing
                continue
            if kind is EntryKind.FILE:
                names.append(name)
        return names

    def get_stats(self, path: PathLike) -> EntryStat:
        return self._classifier.stat(path)

    def read_json_file(self, path: PathLike) -> Any:
        content = self.read_file(path)
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON in file: {path}", path=path) from e

    def write_json_file(self, path: PathLike, data: Any) -> None:
        try:
            content = json.dumps(data, indent=2)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Failed to serialize data to JSON: {path}", path=path
            ) from e
        self.write_file(path, content)
