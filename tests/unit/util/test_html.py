"""Unit tests for HTML escaping."""

from board.util.html import escape_html


class TestEscapeHtml:
    """Tests for escape_html."""

    def test_escapes_script_tag(self):
        assert escape_html("<script>") == "&lt;script&gt;"

    def test_escapes_bare_ampersand(self):
        assert escape_html("&") == "&amp;"

    def test_escapes_quotes(self):
        assert escape_html("\"hi\" 'there'") == "&quot;hi&quot; &#39;there&#39;"

    def test_is_not_idempotent(self):
        """Escaping twice double-escapes existing entities."""
        once = escape_html("a & b")
        assert once == "a &amp; b"
        assert escape_html(once) == "a &amp;amp; b"

    def test_leaves_other_text_untouched(self):
        """Whitespace, case and non-ASCII characters are preserved."""
        text = "  Hello\tWORLD\n héllo 你好 🙂  "
        assert escape_html(text) == text

    def test_escapes_every_occurrence(self):
        assert escape_html("<<>>") == "&lt;&lt;&gt;&gt;"
