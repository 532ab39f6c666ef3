import pytest

from todo_scanner.utils.lexer import LineIndex, parse_source


def _comments(text):
    source = parse_source(text)
    return [(source.comment_text(comment), source.position(comment)) for comment in source.comments]


def test_empty_text_has_no_comments():
    assert _comments("") == []


def test_line_and_block_comments_in_document_order():
    text = "int x = 1; // first\n/* second\n   still second */ int y;\n    // third"

    assert _comments(text) == [
        ("// first", (0, 11)),
        ("/* second\n   still second */", (1, 0)),
        ("// third", (3, 4)),
    ]


def test_line_comment_excludes_line_break():
    assert _comments("// TODO\r\nclass A {}") == [("// TODO", (0, 0))]


@pytest.mark.parametrize(
    "text",
    [
        'var s = "// not a comment";',
        'var s = "escaped \\" // still a string";',
        'var s = @"C:\\dir\\"" // verbatim with doubled quote";',
        'var s = $"{x} // interpolated";',
        'var s = $"{(flag ? "a" : "b")} // nested literal";',
        'var s = @$"{x} /* verbatim interpolated */";',
        'var s = """\n    // raw literal\n    """;',
        "var c = '/'; var d = '\\''; var e = '*';",
    ],
)
def test_markers_inside_literals_are_not_comments(text):
    assert _comments(text) == []


def test_comment_after_literal_is_found():
    text = 'var s = "a // b"; // TODO'

    assert _comments(text) == [("// TODO", (0, 18))]


def test_unterminated_string_ends_at_line_break():
    text = 'var s = "oops\n// TODO'

    assert _comments(text) == [("// TODO", (1, 0))]


def test_unterminated_block_comment_is_dropped():
    text = "// first\n/* never closed // TODO"

    assert _comments(text) == [("// first", (0, 0))]


def test_not_code_is_tolerated():
    text = "This is no C# code, but it has a 'TODO (mristin, 2020-07-20): Do something'."

    assert _comments(text) == []


def test_comment_markers_do_not_nest():
    text = "/* outer /* inner */ // after"

    assert _comments(text) == [("/* outer /* inner */", (0, 0)), ("// after", (0, 21))]


@pytest.mark.parametrize(
    "text, offset, expected",
    [
        ("abc", 0, (0, 0)),
        ("abc", 3, (0, 3)),
        ("a\nb", 2, (1, 0)),
        ("a\r\nb", 3, (1, 0)),
        ("a\rb", 2, (1, 0)),
        ("a\n\nb", 3, (2, 0)),
    ],
)
def test_line_index_position(text, offset, expected):
    assert LineIndex(text).position(offset) == expected


def test_line_index_rejects_out_of_range_offset():
    index = LineIndex("abc")

    with pytest.raises(ValueError):
        index.position(4)
    with pytest.raises(ValueError):
        index.position(-1)


def test_line_index_counts_lines():
    assert LineIndex("a\r\nb\nc").line_count == 3
