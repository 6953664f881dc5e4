import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def join_path(*parts: PathLike) -> str:
    return os.path.join(*parts)


def dir_name(path: PathLike) -> str:
    return os.path.dirname(path)


def as_path(path: PathLike) -> Path:
    return path if isinstance(path, Path) else Path(path)
