"""
Tests for the bot classifier and class-name helper.

Run with: python -m pytest core/tests/test_utils.py -v
"""

import pytest
from django.template import Context, Template

from core.utils import cn, is_likely_bot_user_agent


# =============================================================================
# Bot classification
# =============================================================================

class TestIsLikelyBotUserAgent:

    @pytest.mark.parametrize("user_agent", [
        "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)",
        "Mozilla/5.0 (compatible; bingbot/2.0)",
        "SomeCrawler/1.0",
        "BaiduSpider",
        "Mozilla/5.0 (compatible; Yahoo! Slurp)",
        "facebookexternalhit/1.1",
        "Pingdom.com_bot_version_1.4",
        "Mozilla/5.0 (compatible; Google Page Speed Insights)",
        "Slack link PREVIEW",
        "webcrawling-agent",
    ])
    def test_crawlers_are_bots(self, user_agent):
        assert is_likely_bot_user_agent(user_agent) is True

    @pytest.mark.parametrize("user_agent", ["BOT", "Bot", "bot"])
    def test_match_is_case_insensitive(self, user_agent):
        assert is_likely_bot_user_agent(user_agent) is True

    @pytest.mark.parametrize("user_agent", ["axios/1.2.3", "node-fetch/2.6.7", "  axios/0.27"])
    def test_http_client_libraries_are_bots(self, user_agent):
        assert is_likely_bot_user_agent(user_agent) is True

    def test_client_prefix_must_lead(self):
        assert is_likely_bot_user_agent("Mozilla/5.0 axios/1.2.3") is False

    @pytest.mark.parametrize("user_agent", [None, "", "   "])
    def test_missing_user_agent_is_not_a_bot(self, user_agent):
        assert is_likely_bot_user_agent(user_agent) is False

    @pytest.mark.parametrize("user_agent", [
        "Mozilla/5.0",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36",
        "curl/8.4.0",
    ])
    def test_browsers_are_not_bots(self, user_agent):
        assert is_likely_bot_user_agent(user_agent) is False


# =============================================================================
# Class names
# =============================================================================

class TestCn:

    def test_skips_falsy_values(self):
        assert cn("a", False, "b") == "a b"
        assert cn("a", None, "", 0, "b") == "a b"

    def test_flattens_lists(self):
        assert cn(["a", None, "b"]) == "a b"
        assert cn("x", ["a", ["b", ["c"]]]) == "x a b c"

    def test_mapping_keeps_truthy_keys(self):
        assert cn({"x": True, "y": False}) == "x"
        assert cn({"active": 1, "muted": 0, "wide": "yes"}) == "active wide"

    def test_no_inputs(self):
        assert cn() == ""
        assert cn(None, False, [], {}) == ""

    def test_true_contributes_nothing(self):
        assert cn(True, "a") == "a"

    def test_numbers_are_kept(self):
        assert cn("col", 2) == "col 2"

    def test_template_tag(self):
        template = Template("{% load classnames %}{% cn 'card' flag|yesno:'on,' extra %}")

        assert template.render(Context({"flag": True, "extra": ""})) == "card on"
        assert template.render(Context({"flag": False, "extra": "wide"})) == "card wide"
