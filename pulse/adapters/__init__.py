from pulse.adapters.base import PostSource
from pulse.adapters.reddit import RedditSearchAdapter

__all__ = ["PostSource", "RedditSearchAdapter"]
