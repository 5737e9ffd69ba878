"""Tests for platform-aware folder prefix trimming."""

import pytest

from showfiles.platform.filesystem import PathPrefixTrimmer


@pytest.mark.parametrize(
    ("folder", "path", "expected"),
    [
        ("photos", "photos/cat.jpg", "cat.jpg"),
        ("photos/", "photos/cat.jpg", "cat.jpg"),
        (".", "./notes.txt", "notes.txt"),
        ("./", "./notes.txt", "notes.txt"),
        ("/srv/data", "/srv/data/report.csv", "report.csv"),
        ("other", "photos/cat.jpg", "photos/cat.jpg"),
    ],
)
def test_posix_trimming(folder: str, path: str, expected: str) -> None:
    trimmer = PathPrefixTrimmer.for_platform("linux")
    assert trimmer.trim(folder, path) == expected


def test_posix_trimming_is_case_sensitive() -> None:
    trimmer = PathPrefixTrimmer.for_platform("darwin")
    assert trimmer.trim("Photos", "photos/cat.jpg") == "photos/cat.jpg"


def test_windows_trimming_ignores_case_and_both_separators() -> None:
    trimmer = PathPrefixTrimmer.for_platform("win32")

    assert not trimmer.case_sensitive
    assert trimmer.trim("C:\\Users\\Me", "c:\\users\\me\\Desktop") == "Desktop"
    assert trimmer.trim("docs", "DOCS/readme.md") == "readme.md"


def test_empty_folder_leaves_path_unchanged() -> None:
    assert PathPrefixTrimmer().trim("", "/abs/path") == "/abs/path"
