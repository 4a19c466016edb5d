import os

import pytest

from dirwatch.filesystem import (
    change_working_directory,
    current_working_directory,
    files_info_from_path,
    is_directory,
    is_remote_fs,
    link_real_path,
)


def test_files_info_lists_entries_sorted(tmp_path):
    for name in ("b.txt", "a.txt", "c"):
        if name == "c":
            (tmp_path / name).mkdir()
        else:
            (tmp_path / name).write_bytes(b"x")
    infos = files_info_from_path(str(tmp_path))
    assert list(infos) == sorted(["b.txt", "a.txt", "c"])
    base = str(tmp_path) + os.sep
    for name, info in infos.items():
        assert info.filepath == base + name
    assert infos["c"].is_directory()
    assert infos["a.txt"].is_regular_file()


def test_files_info_same_with_trailing_slash(tmp_path):
    (tmp_path / "a.txt").write_bytes(b"x")
    plain = files_info_from_path(str(tmp_path))
    slashed = files_info_from_path(str(tmp_path) + os.sep)
    assert list(plain) == list(slashed)
    assert [i.filepath for i in plain.values()] == [i.filepath for i in slashed.values()]


def test_files_info_of_missing_directory_is_empty(tmp_path):
    assert files_info_from_path(str(tmp_path / "missing")) == {}


def test_is_directory(tmp_path):
    file_path = tmp_path / "a.txt"
    file_path.write_bytes(b"x")
    assert is_directory(str(tmp_path))
    assert not is_directory(str(file_path))


def test_link_real_path_of_symlinked_directory(tmp_path):
    target = tmp_path / "real"
    target.mkdir()
    link = tmp_path / "alias"
    os.symlink(str(target), str(link))
    result = link_real_path(str(link) + os.sep)
    assert result == (
        os.path.realpath(str(target)) + os.sep,
        str(tmp_path) + os.sep,
    )


def test_link_real_path_of_plain_directory(tmp_path):
    assert link_real_path(str(tmp_path)) is None


def test_change_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    sub = tmp_path / "sub"
    sub.mkdir()
    change_working_directory(str(sub))
    assert os.path.samefile(current_working_directory(), str(sub))
    assert current_working_directory() == os.getcwd()


def test_change_working_directory_to_missing_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    with pytest.raises(FileNotFoundError):
        change_working_directory(str(tmp_path / "missing"))


def test_temporary_directory_is_local(tmp_path):
    assert is_remote_fs(str(tmp_path)) is False