from .bots import is_likely_bot_user_agent
from .classnames import cn

__all__ = ["is_likely_bot_user_agent", "cn"]
