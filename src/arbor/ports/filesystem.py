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

import enum
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class EntryKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


class FilesystemPort(ABC):
    """
    Abstract interface for filesystem access.

    Implementations raise plain OSError (FileNotFoundError, PermissionError, ...);
    services are responsible for translating those into domain errors.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        raise NotImplementedError

    @abstractmethod
    def classify(self, path: Path, follow_symlinks: bool = True) -> EntryKind:
        """Return DIRECTORY for directories, FILE for anything else."""
        raise NotImplementedError

    @abstractmethod
    def stat(self, path: Path) -> dict:
        """Return metadata (path, size, mtime_ns, is_dir) for a given path."""
        raise NotImplementedError

    @abstractmethod
    def list_entries(self, path: Path) -> List[str]:
        """Names directly under `path`, in the order the platform returns them."""
        raise NotImplementedError

    @abstractmethod
    def make_directories(self, path: Path) -> None:
        """Create `path` and any missing ancestors; succeed if already present."""
        raise NotImplementedError

    @abstractmethod
    def copy_file_bytes(self, src: Path, dst: Path) -> None:
        """Copy file contents verbatim, overwriting `dst`."""
        raise NotImplementedError

    @abstractmethod
    def delete_file(self, path: Path) -> None:
        raise NotImplementedError

    @abstractmethod
    def remove_directory(self, path: Path) -> None:
        """Remove an empty directory."""
        raise NotImplementedError

    @abstractmethod
    def rename(self, src: Path, dst: Path) -> None:
        raise NotImplementedError

    @abstractmethod
    def read_text(self, path: Path) -> str:
        raise NotImplementedError

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def append_text(self, path: Path, content: str) -> None:
        raise NotImplementedError
