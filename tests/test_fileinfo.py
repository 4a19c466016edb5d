import dataclasses
import os
import sys

from dirwatch.fileinfo import FileInfo, inode_supported, path_exists, path_is_link


def _write(path, data):
    path.write_bytes(data)
    return str(path)


def test_regular_file_info(tmp_path):
    data = b"hello world"
    path = _write(tmp_path / "a.txt", data)
    info = FileInfo.of(path)
    assert info.filepath == path
    assert info.size == len(data)
    assert info.is_regular_file()
    assert not info.is_directory()
    assert info.is_readable()
    assert info.exists()


def test_directory_keeps_trailing_slash(tmp_path):
    path = str(tmp_path) + os.sep
    info = FileInfo.of(path)
    assert info.filepath == path
    assert info.is_directory()
    assert not info.is_regular_file()
    assert info.exists()


def test_missing_path_has_empty_status(tmp_path):
    missing = str(tmp_path / "missing")
    info = FileInfo.of(missing)
    assert not info.exists()
    assert info == FileInfo()
    assert not path_exists(missing)


def test_equality_ignores_filepath(tmp_path):
    path = _write(tmp_path / "a.txt", b"abc")
    info = FileInfo.of(path)
    renamed = dataclasses.replace(info, filepath=path + "-other")
    assert renamed == info
    grown = dataclasses.replace(info, size=info.size + 1)
    assert grown != info


def test_refresh_picks_up_changes(tmp_path):
    target = tmp_path / "a.txt"
    path = _write(target, b"x")
    info = FileInfo.of(path)
    target.write_bytes(b"xyz123")
    info.refresh()
    assert info.size == len(b"xyz123")


def test_symlink_info(tmp_path):
    target = _write(tmp_path / "target.txt", b"data")
    link = str(tmp_path / "link.txt")
    os.symlink(target, link)
    assert path_is_link(link)
    assert not FileInfo.of(link).is_link()
    assert FileInfo.of(link).is_regular_file()
    link_info = FileInfo.of(link, link_info=True)
    assert link_info.is_link()
    assert link_info.links_to() == os.path.realpath(target)


def test_links_to_of_plain_file_is_empty(tmp_path):
    path = _write(tmp_path / "a.txt", b"data")
    assert FileInfo.of(path, link_info=True).links_to() == ""
    assert not path_is_link(path)


def test_broken_link(tmp_path):
    link = str(tmp_path / "dangling")
    os.symlink(str(tmp_path / "nowhere"), link)
    assert path_is_link(link)
    assert not path_exists(link)
    assert FileInfo.of(link, link_info=True).links_to() == ""


def test_same_inode_for_hard_links(tmp_path):
    first = _write(tmp_path / "a.txt", b"data")
    second = str(tmp_path / "b.txt")
    os.link(first, second)
    other = _write(tmp_path / "c.txt", b"data")
    assert FileInfo.of(first).same_inode(FileInfo.of(second))
    assert not FileInfo.of(first).same_inode(FileInfo.of(other))


def test_inode_supported_matches_platform():
    assert inode_supported() == (sys.platform != "win32")