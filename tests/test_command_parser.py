"""Tests for command parameter extraction."""

import pytest

from inspector_bot.core.commands.parser import extract_params, strip_command
from inspector_bot.core.errors import InvalidCommand, MissingRepoName
from inspector_bot.core.models import SearchQuery


class TestExtractParams:
    """Tests for extract_params."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("/search dblab", SearchQuery("dblab", "", "")),
            ("/search dblab lang:go", SearchQuery("dblab", "go", "")),
            ("/search dblab author:danvergara", SearchQuery("dblab", "", "danvergara")),
            ("/search dblab lang:go author:danvergara", SearchQuery("dblab", "go", "danvergara")),
            ("/search dblab author:danvergara lang:go", SearchQuery("dblab", "go", "danvergara")),
            ("/search go-swagger author:go-swagger lang:go", SearchQuery("go-swagger", "go", "go-swagger")),
        ],
        ids=[
            "only repo",
            "providing a lang",
            "providing an author",
            "providing lang first",
            "providing author first",
            "dashes in repo and author",
        ],
    )
    def test_extract_params(self, text, expected):
        print(f"\n INPUT: {text!r}")
        result = extract_params(text)
        print(f" OUTPUT: {result}")
        assert result == expected

    def test_surrounding_whitespace_is_trimmed(self):
        result = extract_params("   /search dblab lang:go   ")
        assert result == SearchQuery("dblab", "go", "")

    def test_underscores_and_digits_in_repo_name(self):
        result = extract_params("/search my_repo2 author:someone_9")
        assert result.repo_name == "my_repo2"
        assert result.author == "someone_9"

    def test_repo_name_stops_at_invalid_character(self):
        """Only letters, digits, hyphen and underscore belong to the name."""
        result = extract_params("/search dblab.io")
        assert result.repo_name == "dblab"

    def test_empty_lang_value_is_empty(self):
        result = extract_params("/search dblab lang: author:danvergara")
        assert result.language == ""
        assert result.author == "danvergara"

    def test_qualifier_without_leading_space_is_ignored(self):
        result = extract_params("/search dblab xlang:go")
        assert result.language == ""

    @pytest.mark.parametrize(
        "text",
        ["/search", "/search ", "/trend golang", "search dblab", "/search  ", "hello", ""],
    )
    def test_missing_repo_name(self, text):
        print(f"\n INPUT: {text!r}")
        with pytest.raises(MissingRepoName):
            extract_params(text)

    def test_missing_repo_name_is_an_invalid_command(self):
        with pytest.raises(InvalidCommand):
            extract_params("/search !!!")

    def test_search_query_rejects_empty_name(self):
        with pytest.raises(MissingRepoName):
            SearchQuery("")


class TestStripCommand:
    """Tests for strip_command."""

    def test_strip_trend_topic(self):
        assert strip_command("/trend golang", "/trend") == "golang"

    def test_strip_trims_whitespace(self):
        assert strip_command("/trend    rust  ", "/trend") == "rust"

    def test_strip_without_topic(self):
        assert strip_command("/trend", "/trend") == ""

    def test_text_shorter_than_command(self):
        with pytest.raises(InvalidCommand):
            strip_command("/tr", "/trend")
