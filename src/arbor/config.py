# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

from .adapters.local_fs import LocalFS
from .domain.errors import ConfigurationError, NotFoundError, Step, ValidationError
from .paths import PathLike, dir_name
from .services.file_service import FileService


def get_env(key: str, default: Optional[str] = None) -> str:
    """Return an environment variable, or `default`. NotFoundError if neither exists."""
    value = os.environ.get(key)
    if value is None:
        if default is not None:
            return default
        raise NotFoundError(f"Environment variable {key} is not set", step=Step.EXISTS)
    return value


def require_env(key: str) -> None:
    if key not in os.environ:
        raise ValidationError(f"Environment variable {key} is required")


class Config:
    """
    Key/value application configuration backed by a JSON file.

    Construct one at process start and hand it to whatever needs it; there is
    no module-level instance.
    """

    def __init__(
        self, files: Optional[FileService] = None, data: Optional[Dict[str, Any]] = None
    ) -> None:
        self._files = files or FileService(LocalFS())
        self._data: Dict[str, Any] = dict(data or {})

    def load(self, path: PathLike) -> None:
        """
        Replace the current values with the contents of `path`.

        Raises:
            NotFoundError: the file does not exist.
            ConfigurationError: the file is not UTF-8 encoded JSON holding an object.
        """
        if not self._files.exists(path):
            raise NotFoundError(f"Config file not found: {path}", path=path, step=Step.EXISTS)
        try:
            data = json.loads(self._files.read_file(path))
        except ValidationError as e:
            raise ConfigurationError(f"Unreadable config file: {path}", path=path) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {path}", path=path) from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must hold a JSON object: {path}", path=path)
        self._data = data

    def save(self, path: PathLike) -> None:
        """
        Serialise the current values, then create the directory of `path` and
        write them there.

        NotFoundError and InternalError from the file layer propagate as-is;
        only serialisation problems become ValidationError.
        """
        try:
            content = json.dumps(self._data, indent=2)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Failed to save config to file: {path}", path=path) from e
        parent = dir_name(path)
        if parent:
            self._files.create_directory(parent)
        self._files.write_file(path, content)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._data)
