"""
Property-based tests for extension reading and rewriting.

**Feature: extension-editing**
"""

import pytest
from hypothesis import given, settings

from portpath.core.errors import InvalidPathFormatError
from portpath.core.extension import (
    change_extension,
    get_extension,
    get_file_name_without_extension,
    has_extension,
)
from portpath.core.platform import POSIX_SEPARATORS, WINDOWS_SEPARATORS
from tests.path_strategies import extension_text, paths_with_extension, platform_paths


class TestGetExtension:
    """Unit tests for get_extension."""

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("report.doc", ".doc"),
            ("archive.tar.gz", ".gz"),
            ("Makefile", ""),
            ("file.", ""),
            ("", ""),
            (".bashrc", ".bashrc"),
            ("/etc/conf.d/net", ""),
            ("/home/user/notes.md", ".md"),
            ("dir.v2\\file", ""),
        ],
    )
    def test_posix(self, path: str, expected: str):
        assert get_extension(path, POSIX_SEPARATORS) == expected

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("C:\\dir.d\\report.doc", ".doc"),
            ("C:\\dir.d\\readme", ""),
            ("C:.txt", ".txt"),
            ("D:file", ""),
            ("a.b/c", ""),
        ],
    )
    def test_windows(self, path: str, expected: str):
        assert get_extension(path, WINDOWS_SEPARATORS) == expected

    def test_none_propagates(self):
        assert get_extension(None, POSIX_SEPARATORS) is None

    def test_illegal_character_raises(self):
        with pytest.raises(InvalidPathFormatError):
            get_extension("bad<name>.txt", POSIX_SEPARATORS)


class TestChangeExtension:
    """Unit tests for change_extension."""

    @pytest.mark.parametrize(
        "path, extension, expected",
        [
            ("report.doc", ".pdf", "report.pdf"),
            ("report.doc", "pdf", "report.pdf"),
            ("archive.tar.gz", None, "archive.tar"),
            ("Makefile", ".bak", "Makefile.bak"),
            ("Makefile", None, "Makefile"),
            ("file.", ".txt", "file.txt"),
            ("file.txt", "", "file."),
            ("/a.b/c", ".d", "/a.b/c.d"),
        ],
    )
    def test_posix(self, path: str, extension, expected: str):
        assert change_extension(path, extension, POSIX_SEPARATORS) == expected

    def test_windows_volume_separator_bounds_scan(self):
        assert change_extension("C:x", ".y", WINDOWS_SEPARATORS) == "C:x.y"
        assert change_extension("a.b\\c", None, WINDOWS_SEPARATORS) == "a.b\\c"

    def test_empty_path_unchanged(self):
        assert change_extension("", ".txt", POSIX_SEPARATORS) == ""
        assert change_extension("", None, POSIX_SEPARATORS) == ""

    def test_none_propagates(self):
        assert change_extension(None, ".txt", POSIX_SEPARATORS) is None

    def test_illegal_character_raises(self):
        with pytest.raises(InvalidPathFormatError):
            change_extension("a|b.txt", ".md", WINDOWS_SEPARATORS)


class TestExtensionProperties:
    """
    **Feature: extension-editing, Property 1: Adding, stripping and round-tripping extensions**
    """

    @settings(max_examples=100)
    @given(pair=platform_paths(), ext=extension_text())
    def test_adding_extension_appends(self, pair, ext: str):
        """A path without an extension gains exactly the new one."""
        separators, path = pair

        assert change_extension(path, "." + ext, separators) == path + "." + ext

    @settings(max_examples=100)
    @given(triple=paths_with_extension())
    def test_stripping_extension_restores_base(self, triple):
        separators, base, ext = triple

        assert change_extension(base + ext, None, separators) == base

    @settings(max_examples=100)
    @given(triple=paths_with_extension())
    def test_get_and_change_round_trip(self, triple):
        """change_extension(p, get_extension(p)) == p when p has an extension."""
        separators, base, ext = triple
        path = base + ext

        assert get_extension(path, separators) == ext
        assert change_extension(path, get_extension(path, separators), separators) == path


class TestExtensionHelpers:
    """Unit tests for has_extension and get_file_name_without_extension."""

    @pytest.mark.parametrize(
        "path, expected",
        [("a.txt", True), ("a.", False), ("a", False), ("a.d/b", False), (None, False)],
    )
    def test_has_extension(self, path, expected: bool):
        assert has_extension(path, POSIX_SEPARATORS) is expected

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/usr/lib/libc.so.6", "libc.so"),
            ("archive.tar.gz", "archive.tar"),
            ("/usr/bin/env", "env"),
            ("/usr/bin/", ""),
            ("", ""),
        ],
    )
    def test_file_name_without_extension_posix(self, path: str, expected: str):
        assert get_file_name_without_extension(path, POSIX_SEPARATORS) == expected

    def test_file_name_without_extension_windows(self):
        assert get_file_name_without_extension("C:report.doc", WINDOWS_SEPARATORS) == "report"
        assert get_file_name_without_extension("C:\\x\\y.z", WINDOWS_SEPARATORS) == "y"

    def test_file_name_without_extension_none(self):
        assert get_file_name_without_extension(None, WINDOWS_SEPARATORS) is None
