# tests/unit/test_file_service.py
import json
import os
from pathlib import Path

import pytest

from arbor.adapters.local_fs import LocalFS
from arbor.domain.errors import InternalError, NotFoundError, Step, ValidationError
from arbor.ports.filesystem import EntryKind
from arbor.services.file_service import FileService


@pytest.fixture
def files() -> FileService:
    return FileService(LocalFS())


def test_read_and_write_file(tmp_path: Path, files: FileService):
    p = tmp_path / "f.txt"
    files.write_file(p, "Hello, world!")
    assert files.read_file(p) == "Hello, world!"


def test_read_missing_file_raises_not_found(tmp_path: Path, files: FileService):
    with pytest.raises(NotFoundError):
        files.read_file(tmp_path / "missing.txt")


def test_write_rejects_non_string(tmp_path: Path, files: FileService):
    with pytest.raises(ValidationError):
        files.write_file(tmp_path / "f.txt", 123)  # type: ignore[arg-type]
    assert not (tmp_path / "f.txt").exists()


def test_append_creates_then_appends(tmp_path: Path, files: FileService):
    p = tmp_path / "log.txt"
    files.append_to_file(p, "one\n")
    files.append_to_file(p, "two\n")
    assert p.read_text() == "one\ntwo\n"


def test_append_rejects_non_string(tmp_path: Path, files: FileService):
    with pytest.raises(ValidationError):
        files.append_to_file(tmp_path / "log.txt", b"bytes")  # type: ignore[arg-type]


def test_delete_file(tmp_path: Path, files: FileService):
    p = tmp_path / "f.txt"
    p.write_text("x")
    files.delete_file(p)
    assert not p.exists()
    with pytest.raises(NotFoundError):
        files.delete_file(p)


def test_copy_file_overwrites_destination(tmp_path: Path, files: FileService):
    src = tmp_path / "src.txt"
    dst = tmp_path / "dst.txt"
    src.write_bytes(b"\x00\x01new")
    dst.write_text("old")

    files.copy_file(src, dst)

    assert dst.read_bytes() == b"\x00\x01new"
    assert src.exists()


def test_copy_file_missing_source(tmp_path: Path, files: FileService):
    with pytest.raises(NotFoundError):
        files.copy_file(tmp_path / "nope", tmp_path / "dst")


def test_move_file(tmp_path: Path, files: FileService):
    src = tmp_path / "src.txt"
    dst = tmp_path / "dst.txt"
    src.write_text("payload")

    files.move_file(src, dst)

    assert not src.exists()
    assert dst.read_text() == "payload"


def test_move_file_missing_source(tmp_path: Path, files: FileService):
    with pytest.raises(NotFoundError):
        files.move_file(tmp_path / "nope", tmp_path / "dst")


def test_move_file_failure_is_internal(tmp_path: Path):
    class FSBadRename(LocalFS):
        def rename(self, src, dst):
            raise OSError(18, "Invalid cross-device link")

    src = tmp_path / "src.txt"
    src.write_text("x")

    with pytest.raises(InternalError) as exc:
        FileService(FSBadRename()).move_file(src, tmp_path / "dst.txt")
    assert exc.value.step is Step.RENAME


def test_create_directory_is_idempotent(tmp_path: Path, files: FileService):
    d = tmp_path / "a" / "b"
    files.create_directory(d)
    files.create_directory(d)
    assert d.is_dir()


def test_exists(tmp_path: Path, files: FileService):
    assert files.exists(tmp_path)
    assert not files.exists(tmp_path / "missing")


def test_read_directory_and_list_files(tmp_path: Path, files: FileService):
    (tmp_path / "sub").mkdir()
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")

    assert sorted(files.read_directory(tmp_path)) == ["a.txt", "b.txt", "sub"]
    assert sorted(files.list_files_in_directory(tmp_path)) == ["a.txt", "b.txt"]


def test_read_directory_missing(tmp_path: Path, files: FileService):
    with pytest.raises(NotFoundError):
        files.read_directory(tmp_path / "missing")
    with pytest.raises(NotFoundError):
        files.list_files_in_directory(tmp_path / "missing")


def test_get_stats(tmp_path: Path, files: FileService):
    (tmp_path / "f.txt").write_text("abc")
    st = files.get_stats(tmp_path / "f.txt")
    assert st.size == 3
    assert st.kind is EntryKind.FILE
    assert files.get_stats(tmp_path).kind is EntryKind.DIRECTORY
    with pytest.raises(NotFoundError):
        files.get_stats(tmp_path / "missing")


def test_json_roundtrip_uses_two_space_indent(tmp_path: Path, files: FileService):
    p = tmp_path / "data.json"
    files.write_json_file(p, {"a": [1, 2], "b": None})

    assert p.read_text() == json.dumps({"a": [1, 2], "b": None}, indent=2)
    assert files.read_json_file(p) == {"a": [1, 2], "b": None}


def test_read_json_invalid(tmp_path: Path, files: FileService):
    p = tmp_path / "bad.json"
    p.write_text("{not json")
    with pytest.raises(ValidationError):
        files.read_json_file(p)


def test_write_json_unserialisable(tmp_path: Path, files: FileService):
    with pytest.raises(ValidationError):
        files.write_json_file(tmp_path / "x.json", {"s": {1, 2}})
    assert not (tmp_path / "x.json").exists()


class FSNoAccess(LocalFS):
    """exists() fails the way Path.exists does on EACCES before 3.12."""

    def exists(self, path: Path) -> bool:
        raise PermissionError(13, "Permission denied")


def test_read_non_utf8_file_is_validation_error(tmp_path: Path, files: FileService):
    p = tmp_path / "latin1.txt"
    p.write_bytes(b'{"a": "\xff\xfe"}')

    with pytest.raises(ValidationError) as exc:
        files.read_file(p)
    assert exc.value.step is Step.READ
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)

    with pytest.raises(ValidationError):
        files.read_json_file(p)


def test_write_unencodable_text_is_validation_error(tmp_path: Path, files: FileService):
    p = tmp_path / "f.txt"
    with pytest.raises(ValidationError) as exc:
        files.write_file(p, "bad \udc80")
    assert exc.value.step is Step.WRITE


def test_append_unencodable_text_is_validation_error(tmp_path: Path, files: FileService):
    p = tmp_path / "log.txt"
    with pytest.raises(ValidationError) as exc:
        files.append_to_file(p, "bad \udc80")
    assert exc.value.step is Step.APPEND


@pytest.mark.parametrize(
    "call",
    [
        lambda fs, p: fs.read_file(p),
        lambda fs, p: fs.exists(p),
        lambda fs, p: fs.create_directory(p),
        lambda fs, p: fs.delete_file(p),
        lambda fs, p: fs.read_directory(p),
    ],
)
def test_exists_failure_is_internal_error(tmp_path: Path, call):
    f = tmp_path / "f.txt"
    f.write_text("x")

    with pytest.raises(InternalError) as exc:
        call(FileService(FSNoAccess()), f)
    assert exc.value.step is Step.EXISTS
    assert exc.value.path == str(f)


def test_list_files_skips_dangling_symlink(tmp_path: Path, files: FileService):
    (tmp_path / "a.txt").write_text("a")
    try:
        os.symlink(tmp_path / "gone.txt", tmp_path / "dangling")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")

    assert files.list_files_in_directory(tmp_path) == ["a.txt"]
