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

from dataclasses import dataclass

from ..domain.errors import Step, translate_os_errors
from ..paths import PathLike, as_path
from ..ports.filesystem import EntryKind, FilesystemPort


@dataclass(frozen=True)
class EntryStat:
    path: str
    kind: EntryKind
    size: int
    mtime_ns: int


class EntryClassifier:
    """
    Reports whether a path is a file or a directory at the instant of the call.
    Results are never cached.
    """

    def __init__(self, fs: FilesystemPort) -> None:
        self._fs = fs

    def classify(self, path: PathLike, follow_symlinks: bool = True) -> EntryKind:
        """
        Raises:
            NotFoundError: if the path does not exist.
            InternalError: if stat fails for any other reason.
        """
        p = as_path(path)
        with translate_os_errors(Step.STAT, p, missing_is_not_found=True):
            return self._fs.classify(p, follow_symlinks=follow_symlinks)

    def stat(self, path: PathLike) -> EntryStat:
        p = as_path(path)
        with translate_os_errors(Step.STAT, p, missing_is_not_found=True):
            meta = self._fs.stat(p)
        return EntryStat(
            path=str(meta.get("path", p)),
            kind=EntryKind.DIRECTORY if meta.get("is_dir") else EntryKind.FILE,
            size=int(meta.get("size", 0)),
            mtime_ns=int(meta.get("mtime_ns", 0)),
        )
