from softbreaks.models.buffer import LineBuffer, ListBuffer


def test_from_text_tracks_trailing_newline():
    buf = ListBuffer.from_text("a\nb\n")
    assert buf.lines == ["a", "b"]
    assert buf.trailing_newline
    assert buf.to_text() == "a\nb\n"


def test_from_text_without_trailing_newline():
    buf = ListBuffer.from_text("a\nb")
    assert buf.lines == ["a", "b"]
    assert buf.to_text() == "a\nb"


def test_from_text_crlf():
    buf = ListBuffer.from_text("a\r\nb\r\n")
    assert buf.lines == ["a", "b"]
    assert buf.newline == "\r\n"
    assert buf.to_text() == "a\r\nb\r\n"


def test_empty_documents():
    assert ListBuffer.from_text("").lines == []
    assert ListBuffer.from_text("").to_text() == ""
    assert ListBuffer.from_text("\n").lines == [""]
    assert ListBuffer.from_text("\n").to_text() == "\n"


def test_set_line_with_newline_inserts_a_line():
    buf = ListBuffer(["first second", "next"])
    buf.set_line(0, "first\nsecond")
    assert buf.line_count() == 3
    assert buf.get_line(1) == "second"
    assert buf.get_line(2) == "next"


def test_list_buffer_satisfies_protocol():
    assert isinstance(ListBuffer(), LineBuffer)


def test_mixed_line_endings_are_kept_per_line():
    text = "a\r\nb\nc\r\n"
    buf = ListBuffer.from_text(text)
    assert buf.lines == ["a", "b", "c"]
    assert buf.newline == "\r\n"
    assert buf.to_text() == text


def test_split_line_keeps_its_own_ending():
    buf = ListBuffer.from_text("one two\nlast\r\n")
    buf.set_line(0, "one\ntwo")
    assert buf.lines == ["one", "two", "last"]
    # The inserted break uses the document's separator; "two" keeps the original "\n".
    assert buf.to_text() == "one\ntwo\nlast\r\n"


def test_lines_never_contain_a_newline():
    buf = ListBuffer.from_text("x\r\ny\nz\r\n\n")
    assert all("\n" not in line for line in buf.lines)
    assert buf.lines == ["x", "y", "z", ""]
