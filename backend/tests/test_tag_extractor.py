"""
Memos Backend — Tag Extractor Unit Tests
=========================================

What:  Tests for hashtag extraction from memo content.
Why:   The suggestion endpoint is only as good as this pattern.
"""

import pytest

from app.services.tag_extractor import TAG_PATTERN, find_tag_list_from_memo_content


class TestFindTagList:

    def test_dedupes_and_sorts(self):
        """Repeated tags appear once, in alphabetical order."""
        assert find_tag_list_from_memo_content("hello #world #foo #world") == ["foo", "world"]

    def test_no_tags(self):
        assert find_tag_list_from_memo_content("plain text, no hashes") == []

    def test_empty_content(self):
        assert find_tag_list_from_memo_content("") == []

    def test_lone_hash_is_not_a_tag(self):
        assert find_tag_list_from_memo_content("# heading and #") == []

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("a##b", ["b"]),
            ("#foo#bar", ["bar", "foo"]),
            ("#tag.with/punct!", ["tag.with/punct!"]),
            ("line1 #one\n#two\t#three", ["one", "three", "two"]),
            ("prefix#glued", ["glued"]),
        ],
    )
    def test_maximal_runs(self, content, expected):
        """A tag runs until whitespace or the next '#'."""
        assert find_tag_list_from_memo_content(content) == expected

    def test_case_is_preserved(self):
        assert find_tag_list_from_memo_content("#Work #work") == ["Work", "work"]

    def test_unicode_tags(self):
        assert find_tag_list_from_memo_content("#日记 #café") == ["café", "日记"]

    @pytest.mark.parametrize(
        "content, expected",
        [
            ("#读书\u3000笔记", ["读书\u3000笔记"]),
            ("#no\u00a0break", ["no\u00a0break"]),
            ("#vertical\vtab", ["vertical\vtab"]),
        ],
    )
    def test_only_ascii_whitespace_ends_a_tag(self, content, expected):
        """Full-width, no-break and vertical-tab spaces stay inside the tag."""
        assert find_tag_list_from_memo_content(content) == expected

    def test_trailing_punctuation_is_part_of_the_tag(self):
        assert find_tag_list_from_memo_content("see #books, then #books") == ["books", "books,"]

    def test_pattern_captures_without_hash(self):
        assert TAG_PATTERN.findall("#a #b") == ["a", "b"]
