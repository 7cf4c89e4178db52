"""
Fixed lexicons.

Sentiment word lists, keyword stop-words and theme trigger terms.
All tables are immutable and built once at import time.
"""

POSITIVE_WORDS = frozenset([
    "good", "great", "excellent", "awesome", "amazing", "love", "best",
    "perfect", "fantastic", "wonderful", "happy", "easy", "helpful",
    "recommend", "recommended", "nice", "beautiful", "fun", "enjoy",
    "worth", "favorite", "improvement", "improved", "better", "useful",
])

NEGATIVE_WORDS = frozenset([
    "bad", "terrible", "awful", "horrible", "poor", "worst", "waste",
    "useless", "difficult", "hate", "crash", "bug", "problem", "issue",
    "disappointing", "disappointed", "fix", "error", "fail", "fails",
    "wrong", "frustrating", "slow", "expensive", "annoying", "boring",
])

# English stop-words plus "app", which appears in nearly every review
STOP_WORDS = frozenset([
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves",
    "you", "your", "yours", "yourself", "yourselves", "he", "him",
    "his", "himself", "she", "her", "hers", "herself", "it", "its",
    "itself", "they", "them", "their", "theirs", "themselves",
    "what", "which", "who", "whom", "this", "that", "these", "those",
    "am", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "having", "do", "does", "did", "doing", "a", "an",
    "the", "and", "but", "if", "or", "because", "as", "until", "while",
    "of", "at", "by", "for", "with", "about", "against", "between",
    "into", "through", "during", "before", "after", "above", "below",
    "to", "from", "up", "down", "in", "out", "on", "off", "over",
    "under", "again", "further", "then", "once", "here", "there",
    "when", "where", "why", "how", "all", "any", "both", "each",
    "few", "more", "most", "other", "some", "such", "no", "nor",
    "not", "only", "own", "same", "so", "than", "too", "very",
    "s", "t", "can", "will", "just", "don", "should", "now", "app",
])

# Theme triggers (matched as substrings of observed keywords)
STABILITY_TRIGGERS = ("bug", "crash", "freezes", "frozen", "stuck", "error")
PRICING_TRIGGERS = ("price", "cost", "expensive", "cheap", "free", "subscription", "payment")
UX_TRIGGERS = (
    "interface", "design", "layout", "ugly", "beautiful", "easy", "difficult", "confusing",
)


# Design Rationale and Trade-offs:
#
# 1. Why fixed word lists instead of a trained model?
#    - Same text always yields the same label
#    - No model download or API key
#    - Trade-off: Misses sarcasm, negation and domain slang
#
# 2. Why frozensets?
#    - O(1) membership per token
#    - Cannot be mutated by callers at runtime
#    - Trade-off: Custom lexicons are passed to the agents instead
#
# 3. Why are theme triggers tuples and not sets?
#    - They are matched as substrings, never looked up by membership
#    - Declared order is kept for readers
#    - Trade-off: Linear scan, fine for a handful of triggers
