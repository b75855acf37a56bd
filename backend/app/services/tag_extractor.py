"""Hashtag extraction from memo content."""

import re
from typing import List

# A tag is the maximal run of non-whitespace, non-'#' characters after a '#'.
# "a##b" yields only "b"; "#foo#bar" yields "foo" and "bar".
# Whitespace is the ASCII set only (tab, newline, form feed, CR, space), not
# Python's Unicode-aware \s: "#读书　笔记" is one tag across the U+3000, as
# tags written by the other memos services are.
TAG_PATTERN = re.compile(r"#([^\t\n\f\r #]+)")


def find_tag_list_from_memo_content(content: str) -> List[str]:
    """
    Extract hashtag names from free text.

    Args:
        content: Memo content

    Returns:
        Unique tag names without the leading '#', sorted ascending.
        Case is preserved, so "#Work" and "#work" are distinct.

    Example:
        >>> find_tag_list_from_memo_content("hello #world #foo #world")
        ['foo', 'world']
    """
    return sorted(set(TAG_PATTERN.findall(content)))
