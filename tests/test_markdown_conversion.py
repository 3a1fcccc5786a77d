from pathlib import Path

import pytest

from ssg.render import ConversionError, DocumentSet, convert_file, convert_line, convert_lines


def test_heading_keeps_line_ending_in_legacy_mode() -> None:
    assert convert_line("# Title\n", preserve_line_endings=True) == "<h1>Title\n</h1>"


def test_heading_trims_line_ending_by_default() -> None:
    assert convert_line("# Title\n") == "<h1>Title</h1>"
    assert convert_line("# Title\r\n") == "<h1>Title</h1>"


def test_paragraph_escapes_html() -> None:
    assert convert_line("Hello <world>\n", preserve_line_endings=True) == "<p>Hello &lt;world&gt;\n</p>"
    assert convert_line("Hello <world>\n") == "<p>Hello &lt;world&gt;</p>"
    assert convert_line('say "hi" & bye') == "<p>say &quot;hi&quot; &amp; bye</p>"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("## Section", "<h2>Section</h2>"),
        ("###### Six", "<h6>Six</h6>"),
        ("######## Eight", "<h8>Eight</h8>"),
        ("#NoSpace", "<h1>NoSpace</h1>"),
        ("#  Two spaces", "<h1> Two spaces</h1>"),
        ("# <b>bold</b>", "<h1>&lt;b&gt;bold&lt;/b&gt;</h1>"),
        ("  # indented", "<p>  # indented</p>"),
    ],
)
def test_heading_levels(line: str, expected: str) -> None:
    assert convert_line(line) == expected


@pytest.mark.parametrize("line", ["", "\n", "   \n", "\t\r\n"])
def test_blank_lines_are_dropped(line: str) -> None:
    assert convert_line(line) is None


def test_convert_lines_concatenates_without_empty_paragraphs() -> None:
    html = convert_lines(["# Title\n", "\n", "first\n", "   \n", "second\n"])
    assert html == "<h1>Title</h1><p>first</p><p>second</p>"
    assert "<p></p>" not in html


def test_convert_file_reports_missing_file(tmp_path: Path) -> None:
    result = convert_file(tmp_path / "missing.md")
    assert not result.ok
    assert result.html is None
    assert "missing.md" in (result.error or "")


def test_convert_file_preserves_crlf_in_legacy_mode(tmp_path: Path) -> None:
    source = tmp_path / "page.md"
    source.write_bytes(b"# Title\r\nBody\r\n")
    legacy = convert_file(source, preserve_line_endings=True)
    assert legacy.html == "<h1>Title\r\n</h1><p>Body\r\n</p>"
    assert convert_file(source).html == "<h1>Title</h1><p>Body</p>"


def test_document_set_is_restartable(tmp_path: Path) -> None:
    first = tmp_path / "a.md"
    second = tmp_path / "b.md"
    first.write_text("# A\n", encoding="utf-8")
    second.write_text("B\n", encoding="utf-8")

    documents = DocumentSet([first, second])
    run_one = [(doc.source, doc.html) for doc in documents]
    run_two = [(doc.source, doc.html) for doc in documents]

    assert len(documents) == 2
    assert run_one == run_two == [(first, "<h1>A</h1>"), (second, "<p>B</p>")]


def test_document_set_raises_on_unreadable_file(tmp_path: Path) -> None:
    good = tmp_path / "good.md"
    bad = tmp_path / "bad.md"
    good.write_text("ok\n", encoding="utf-8")
    bad.write_bytes(b"\xff\xfe\xfa not utf-8\n")

    iterator = iter(DocumentSet([good, bad]))
    assert next(iterator).html == "<p>ok</p>"
    with pytest.raises(ConversionError) as exc:
        next(iterator)
    assert exc.value.result.source == bad


def test_legacy_mode_escapes_apostrophe_numerically() -> None:
    assert convert_line("it's\n", preserve_line_endings=True) == "<p>it&#039;s\n</p>"
    assert convert_line("# it's", preserve_line_endings=True) == "<h1>it&#039;s</h1>"
    assert convert_line("it's") == "<p>it&#x27;s</p>"


def test_non_ascii_whitespace_is_not_blank() -> None:
    assert convert_line("\xa0\n") == "<p>\xa0</p>"
    assert convert_line(" \t\x0b\0\r\n") is None
