"""
User-agent classification for crawler and script traffic.
"""

import re
from typing import Optional

# Crawlers, link-preview fetchers, indexers and uptime monitors
BOT_USER_AGENT_PATTERN = re.compile(
    r"(bot|crawler|spider|crawling|facebookexternalhit|slurp|pingdom|preview|insights)",
    re.IGNORECASE,
)

# HTTP client libraries that never identify as bots but are never browsers
DISALLOWED_PREFIXES = ("axios/", "node-fetch/")


def is_likely_bot_user_agent(user_agent: Optional[str]) -> bool:
    """Return True when the User-Agent looks like automated traffic."""
    if not user_agent:
        return False

    value = user_agent.strip()
    if not value:
        return False

    if BOT_USER_AGENT_PATTERN.search(value):
        return True

    return value.startswith(DISALLOWED_PREFIXES)
