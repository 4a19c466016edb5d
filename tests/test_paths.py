import os
import unicodedata

from dirwatch.paths import (
    add_slash_at_end,
    file_name_from_path,
    os_slash,
    path_remove_file_name,
    precompose_file_name,
    remove_slash_at_end,
    slash_at_end,
)

SEP = os.sep


def test_os_slash_matches_platform():
    assert os_slash() == os.sep


def test_slash_at_end():
    assert slash_at_end("dir" + SEP) is True
    assert slash_at_end("dir") is False
    assert slash_at_end("") is False


def test_add_slash():
    assert add_slash_at_end("dir") == "dir" + SEP
    assert add_slash_at_end("dir" + SEP) == "dir" + SEP


def test_add_slash_short_path_untouched():
    assert add_slash_at_end("a") == "a"
    assert add_slash_at_end("") == ""


def test_remove_slash():
    assert remove_slash_at_end("dir" + SEP) == "dir"
    assert remove_slash_at_end("dir") == "dir"


def test_remove_slash_root_untouched():
    assert remove_slash_at_end(SEP) == SEP


def test_add_remove_round_trip():
    path = SEP.join(["", "home", "user"])
    assert remove_slash_at_end(add_slash_at_end(path)) == path


def test_file_name_from_path():
    path = SEP.join(["", "home", "user", "file.txt"])
    assert file_name_from_path(path) == "file.txt"


def test_file_name_from_dir_with_trailing_slash():
    path = SEP.join(["", "home", "user", "docs"]) + SEP
    assert file_name_from_path(path) == "docs"


def test_file_name_without_separator():
    assert file_name_from_path("plain") == "plain"


def test_path_remove_file_name():
    base = SEP.join(["", "home", "user"]) + SEP
    assert path_remove_file_name(base + "file.txt") == base


def test_path_remove_file_name_of_directory():
    base = SEP.join(["", "home", "user"]) + SEP
    assert path_remove_file_name(base + "docs" + SEP) == base


def test_split_recombines():
    path = SEP.join(["", "var", "log", "syslog"])
    assert path_remove_file_name(path) + file_name_from_path(path) == path


def test_path_remove_file_name_without_separator():
    assert path_remove_file_name("plain") == "plain"


def test_precompose_keeps_composed_name():
    name = unicodedata.normalize("NFC", "cafe\u0301")
    assert precompose_file_name(name) == name


def test_precompose_result_is_equivalent():
    name = "cafe\u0301"
    result = precompose_file_name(name)
    assert unicodedata.normalize("NFC", result) == unicodedata.normalize("NFC", name)