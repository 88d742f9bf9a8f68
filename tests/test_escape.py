#
# Varinspect - Escape Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from varinspect import escape


# Tests ----------------------------------------------------------------------------------------------------------------

class TestControl:
    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("", "", id="empty"),
            pytest.param("plain text", "plain text", id="plain"),
            pytest.param("a\nb", "a\\nb", id="newline"),
            pytest.param("\r\t", "\\r\\t", id="cr-tab"),
            pytest.param("\x00", "\\x00", id="nul"),
            pytest.param("\x1b[0m", "\\x1b[0m", id="esc"),
            pytest.param("\x7f", "\\x7f", id="del"),
            pytest.param("é€", "é€", id="non-ascii"),
        ],
    )
    def test_control(self, text, expected):
        assert escape.control(text) == expected


class TestHtml:
    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("", "", id="empty"),
            pytest.param("a & b", "a &amp; b", id="amp"),
            pytest.param("<br />", "&lt;br /&gt;", id="tag"),
            pytest.param('"q"', "&quot;q&quot;", id="double-quote"),
            pytest.param("'q'", "&#x27;q&#x27;", id="single-quote"),
        ],
    )
    def test_html(self, text, expected):
        assert escape.html(text) == expected
