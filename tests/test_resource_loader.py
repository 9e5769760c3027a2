"""
Resource Loader Tests

Run with: pytest tests/test_resource_loader.py -v
"""

import pytest

from beanxml_core.resolution import DirectoryResourceLoader, parse_properties


class TestParseProperties:
    """Tests for the minimal properties reader."""

    def test_separators(self):
        """Equals, colon and whitespace all separate key from value."""
        text = "a=1\nb: 2\nc   3\n"
        assert parse_properties(text) == {"a": "1", "b": "2", "c": "3"}

    def test_comments_and_blank_lines(self):
        """Hash and bang lines and blank lines are skipped."""
        text = "# comment\n! also a comment\n\n   \nkey=value\n"
        assert parse_properties(text) == {"key": "value"}

    def test_escaped_colon_in_key(self):
        """Schema URLs escape their colons."""
        text = "http\\://www.example.org/schema/beans.xsd=schemas/beans.xsd\n"
        assert parse_properties(text) == {
            "http://www.example.org/schema/beans.xsd": "schemas/beans.xsd"
        }

    def test_continuation_lines(self):
        """A trailing backslash joins the next line, minus its indent."""
        text = "key=first,\\\n    second\n"
        assert parse_properties(text) == {"key": "first,second"}

    def test_escapes_in_value(self):
        """Character and unicode escapes are decoded."""
        assert parse_properties("k=a\\tb\\u0041\n") == {"k": "a\tbA"}

    def test_later_keys_override(self):
        """Within one file the last definition wins."""
        assert parse_properties("k=1\nk=2\n") == {"k": "2"}

    @pytest.mark.parametrize("marker", ["#", "!"])
    def test_comment_ending_in_backslash_does_not_continue(self, marker):
        """A trailing backslash on a comment line leaves the next line alone."""
        text = marker + " see the docs \\\nhttp\\://a/b.xsd=x/b.xsd\n"
        assert parse_properties(text) == {"http://a/b.xsd": "x/b.xsd"}

    def test_continued_value_may_start_with_hash(self):
        """A continuation line beginning with a hash is still part of the value."""
        assert parse_properties("k=a\\\n  #b\n") == {"k": "a#b"}


class TestDirectoryResourceLoader:
    """Tests for DirectoryResourceLoader."""

    def test_merges_properties_first_root_wins(self, tmp_path):
        """Earlier search paths take precedence."""
        first, second = tmp_path / "first", tmp_path / "second"
        for root, body in ((first, "a=first\n"), (second, "a=second\nb=second\n")):
            (root / "META-INF").mkdir(parents=True)
            (root / "META-INF" / "beanxml.schemas").write_text(body)

        loader = DirectoryResourceLoader([first, second])
        assert loader.load_all_properties("META-INF/beanxml.schemas") == {
            "a": "first", "b": "second"
        }

    def test_missing_properties_gives_empty(self, tmp_path):
        """No mapping file anywhere is not an error."""
        loader = DirectoryResourceLoader([tmp_path])
        assert loader.load_all_properties("META-INF/beanxml.schemas") == {}

    def test_open_resource(self, resources_dir):
        """Resources open as binary streams; a leading slash is ignored."""
        loader = DirectoryResourceLoader([resources_dir])
        with loader.open_resource("/schemas/beans.dtd") as stream:
            assert stream.read().startswith(b"<!ELEMENT beans")

    def test_open_missing_resource(self, tmp_path):
        """Unknown resources raise FileNotFoundError."""
        loader = DirectoryResourceLoader([tmp_path])
        with pytest.raises(FileNotFoundError):
            loader.open_resource("schemas/nope.xsd")

    def test_properties_read_as_latin1_by_default(self, tmp_path):
        """Mapping tables are ISO-8859-1 unless told otherwise."""
        (tmp_path / "META-INF").mkdir()
        (tmp_path / "META-INF" / "beanxml.schemas").write_bytes(
            b"# caf\xe9 schemas\nhttp\\://x/s.xsd=s.xsd\n"
        )
        loader = DirectoryResourceLoader([tmp_path])
        assert loader.load_all_properties("META-INF/beanxml.schemas") == {
            "http://x/s.xsd": "s.xsd"
        }

    def test_configured_encoding(self, tmp_path):
        """A UTF-8 loader decodes UTF-8 tables."""
        (tmp_path / "t.properties").write_text("k=café\n", encoding="utf-8")
        loader = DirectoryResourceLoader([tmp_path], encoding="utf-8")
        assert loader.load_all_properties("t.properties") == {"k": "café"}
