"""
Shared keyword lists for sentiment scoring and theme extraction.
"""

POSITIVE_WORDS = [
    "great", "amazing", "love", "best", "awesome", "excellent", "good",
    "better", "prefer", "recommend", "perfect", "fantastic", "outstanding",
]

NEGATIVE_WORDS = [
    "terrible", "hate", "worst", "bad", "awful", "sucks", "problems",
    "issues", "disappointing", "frustrating", "annoying", "broken",
]

THEME_KEYWORDS = [
    "monetization", "audience", "discovery", "writing", "creators",
    "newsletter", "paywall", "algorithm", "community", "engagement",
    "seo", "traffic", "subscribers", "revenue", "analytics",
]
