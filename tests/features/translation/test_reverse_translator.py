"""Tests for POSIX-to-host output translation."""

from __future__ import annotations

import pytest

from wslgit.features.translation import ForwardTranslator, ReverseTranslator


@pytest.fixture
def reverse() -> ReverseTranslator:
    return ReverseTranslator()


def test_path_with_spaces_stops_at_whitespace(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"/mnt/d/some path/a file.md") == b"d:/some path/a file.md"


def test_remote_line(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"origin  /mnt/c/path/ (fetch)") == b"origin  c:/path/ (fetch)"


def test_multiline(reverse: ReverseTranslator) -> None:
    output = b"mirror  /mnt/c/other/ (fetch)\nmirror  /mnt/c/other/ (push)\n"
    expected = b"mirror  c:/other/ (fetch)\nmirror  c:/other/ (push)\n"

    assert reverse.to_host(output) == expected


def test_mixed_lines_keep_unmatched_lines(reverse: ReverseTranslator) -> None:
    output = b"/mnt/other/file.sh\r\n/mnt/e/x\r\n"

    assert reverse.to_host(output) == b"/mnt/other/file.sh\r\ne:/x\r\n"


@pytest.mark.parametrize(
    "data",
    [
        b"/mnt/other/file.sh",
        b"/mnt/c",
        b"/mnt/c ",
        b"/mnt/1/x",
        b"/mnt//mnt",
        b"nothing to see here\n",
        b"\xff\xfe\x00/mnt/\x00",
        b"",
    ],
)
def test_unmatched_input_is_unchanged(reverse: ReverseTranslator, data: bytes) -> None:
    assert reverse.to_host(data) == data


def test_uppercase_letter_is_kept(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"/mnt/C/Work") == b"C:/Work"


def test_match_inside_token(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"file:/mnt/d/x y") == b"file:d:/x y"


def test_bare_drive_root(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"/mnt/c/\n") == b"c:/\n"


def test_nested_marker_is_consumed_by_first_match(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"/mnt/c/mnt/d/x") == b"c:/mnt/d/x"


def test_adjacent_marker_after_false_start(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"/mnt//mnt/c/x") == b"/mnt/c:/x"


def test_invalid_utf8_inside_path_is_preserved(reverse: ReverseTranslator) -> None:
    assert reverse.to_host(b"/mnt/c/\xff\xfe\tend") == b"c:/\xff\xfe\tend"


def test_custom_mount_root() -> None:
    reverse = ReverseTranslator("/media/")

    assert reverse.to_host(b"/media/e/x /mnt/c/y") == b"e:/x /mnt/c/y"


@pytest.mark.parametrize("letter", ["c", "D", "z"])
@pytest.mark.parametrize("suffix", ["file.txt", "a dir\\b.md", "x\\y\\z"])
def test_forward_then_reverse_recovers_drive_form(letter: str, suffix: str) -> None:
    forward = ForwardTranslator(lambda _path: False)
    reverse = ReverseTranslator()

    posix = forward.to_posix(f"{letter}:\\{suffix}")
    host = reverse.to_host(posix.encode("utf-8")).decode("utf-8")

    assert host == f"{letter.lower()}:/" + suffix.replace("\\", "/")
