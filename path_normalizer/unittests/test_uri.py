"""Unit tests for ``file:`` URI and percent-encoding decoding."""

from __future__ import annotations

import logging
import typing as t

import pytest

from path_normalizer.platform import StaticPlatform
from path_normalizer.uri import (
    decode_possible_file_uri,
    file_uri_to_path,
    percent_decode,
)

POSIX = StaticPlatform("linux", home="/home/tester")
WINDOWS = StaticPlatform("win32", home="C:\\Users\\tester")


class TestFileUriToPath:
    """Tests for file_uri_to_path()."""

    def test_posix_uri_decodes_escapes(self) -> None:
        """POSIX hosts keep forward slashes and decode escapes."""
        uri = "file:///home/user/a%20b.txt"
        assert file_uri_to_path(uri, context=POSIX) == "/home/user/a b.txt"

    def test_localhost_authority_is_ignored(self) -> None:
        """``file://localhost/`` names the local machine."""
        assert file_uri_to_path("file://localhost/etc/hosts", context=POSIX) == (
            "/etc/hosts"
        )

    def test_windows_drive_uri(self) -> None:
        """The slash before a drive letter is removed on Windows."""
        uri = "file:///C:/Users/x"
        assert file_uri_to_path(uri, context=WINDOWS) == "C:\\Users\\x"

    def test_windows_encoded_drive_colon(self) -> None:
        """Percent-encoded drive colons are decoded before the drive check."""
        uri = "file:///c%3A/Users/x"
        assert file_uri_to_path(uri, context=WINDOWS) == "c:\\Users\\x"

    def test_windows_localhost_drive_uri(self) -> None:
        """``localhost`` does not turn a drive URI into a UNC path."""
        uri = "file://localhost/C:/x"
        assert file_uri_to_path(uri, context=WINDOWS) == "C:\\x"

    def test_windows_remote_host_becomes_unc(self) -> None:
        """A remote authority maps to a UNC prefix."""
        uri = "file://server/share/doc.txt"
        assert file_uri_to_path(uri, context=WINDOWS) == (
            "\\\\server\\share\\doc.txt"
        )

    def test_posix_drive_uri_keeps_leading_slash(self) -> None:
        """Drive stripping only happens on Windows."""
        uri = "file:///C:/Users/x"
        assert file_uri_to_path(uri, context=POSIX) == "/C:/Users/x"

    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("file:///a/b/../c", "/a/c"),
            ("file:///a/./b", "/a/b"),
            ("file:///a/b/", "/a/b/"),
            ("file:///a/b/..", "/a/"),
            ("file:///../x", "/x"),
            ("file:///", "/"),
        ],
    )
    def test_posix_dot_segments_are_resolved(self, uri: str, expected: str) -> None:
        """Dot segments in the URI path are resolved while parsing."""
        assert file_uri_to_path(uri, context=POSIX) == expected

    def test_windows_dot_segments_are_resolved(self) -> None:
        """Resolution happens before the drive slash is stripped."""
        uri = "file:///C:/a/../b"
        assert file_uri_to_path(uri, context=WINDOWS) == "C:\\b"

    def test_encoded_slash_is_not_a_segment_boundary(self) -> None:
        """An escaped slash next to ``..`` is decoded after resolution."""
        uri = "file:///a/b%2F../c"
        assert file_uri_to_path(uri, context=POSIX) == "/a/b/../c"

    @pytest.mark.parametrize("uri", ["https://example.com/x", "/tmp/x", ""])
    def test_non_file_values_pass_through(self, uri: str) -> None:
        """Anything that is not a ``file:`` URI is returned unchanged."""
        assert file_uri_to_path(uri, context=POSIX) == uri

    def test_non_string_passes_through(self) -> None:
        """Non-string values are returned as given."""
        assert file_uri_to_path(t.cast("str", None)) is None

    def test_unparseable_uri_falls_back_to_decoding(self) -> None:
        """When the URI parser fails the text after ``file://`` is decoded."""
        assert file_uri_to_path("file://[::1/a%20b", context=POSIX) == "[::1/a b"

    @pytest.mark.parametrize(
        "uri", ["file://[::1/%zz", "file:///tmp/%FF", "file:///tmp/%E0%A4%A"]
    )
    def test_undecodable_uri_is_returned_verbatim(self, uri: str) -> None:
        """If every decoding strategy fails the input comes back unchanged."""
        assert file_uri_to_path(uri, context=POSIX) == uri

    def test_fallback_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Falling back to scheme stripping leaves a debug breadcrumb."""
        caplog.set_level(logging.DEBUG, logger="path_normalizer.uri")
        file_uri_to_path("file://[::1/x", context=POSIX)
        assert any("falling back" in record.message for record in caplog.records)


class TestDecodePossibleFileUri:
    """Tests for decode_possible_file_uri()."""

    def test_percent_encoded_path(self) -> None:
        """Scheme-less percent-encoding is decoded."""
        assert decode_possible_file_uri("%2Fhome%2Fuser") == "/home/user"

    def test_percent_encoded_windows_path(self) -> None:
        """Encoded backslashes and colons are decoded too."""
        assert decode_possible_file_uri("C%3A%5CUsers%5Cx") == "C:\\Users\\x"

    def test_file_uri_is_delegated(self) -> None:
        """``file:`` values are handled like file_uri_to_path()."""
        uri = "file:///C:/Users/x"
        assert decode_possible_file_uri(uri, context=WINDOWS) == "C:\\Users\\x"

    @pytest.mark.parametrize("raw", ["%E0%A4%A", "%FF", "50%zz%41"])
    def test_invalid_escapes_are_returned_unchanged(self, raw: str) -> None:
        """Malformed escapes never raise."""
        assert decode_possible_file_uri(raw) == raw

    @pytest.mark.parametrize("raw", ["/tmp/x", "100%", "C:\\Users"])
    def test_plain_paths_are_unchanged(self, raw: str) -> None:
        """Paths without escapes are left alone."""
        assert decode_possible_file_uri(raw) == raw

    def test_non_string_passes_through(self) -> None:
        """Non-string values are returned as given."""
        value = t.cast("str", 42)
        assert decode_possible_file_uri(value) == 42


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a%20b", "a b"),
        ("%C3%A9t%C3%A9", "été"),
        ("no-escapes", "no-escapes"),
        ("%", None),
        ("%4", None),
        ("%G1", None),
        ("%C3", None),
    ],
)
def test_percent_decode(raw: str, expected: str | None) -> None:
    """Strict decoding rejects malformed escapes and invalid UTF-8."""
    assert percent_decode(raw) == expected
