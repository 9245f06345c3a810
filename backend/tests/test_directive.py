"""
Unit tests for reply directive parsing.
"""

from hanuman.agents.directive import DirectAnswer, ToolRequest, parse_reply


class TestParseReply:
    """Tests for parse_reply."""

    def test_plain_text_is_direct_answer(self):
        assert parse_reply("The sky is blue.") == DirectAnswer(text="The sky is blue.")

    def test_empty_reply_is_direct_answer(self):
        assert parse_reply("") == DirectAnswer(text="")

    def test_search_directive(self):
        assert parse_reply("NEED_SEARCH: iphone 16 launch date") == ToolRequest(
            name="webSearch", query="iphone 16 launch date"
        )

    def test_search_directive_without_space(self):
        assert parse_reply("NEED_SEARCH:gold price").query == "gold price"

    def test_empty_query(self):
        directive = parse_reply("NEED_SEARCH:  \n ")
        assert isinstance(directive, ToolRequest)
        assert directive.query == ""

    def test_prefix_must_be_at_start(self):
        assert isinstance(parse_reply(" NEED_SEARCH: x"), DirectAnswer)
        assert isinstance(parse_reply("I will NEED_SEARCH: x"), DirectAnswer)

    def test_prefix_is_case_sensitive(self):
        assert isinstance(parse_reply("need_search: x"), DirectAnswer)
