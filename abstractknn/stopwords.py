"""English stopwords removed from abstracts before vectorising."""

from __future__ import annotations

__all__ = ["STOPWORDS", "is_stopword"]

_SNOWBALL = (
    "which", "who", "whom", "this", "that", "these", "those", "would",
    "should", "could", "ought", "im", "youre", "hes", "shes", "its", "were",
    "theyre", "ive", "youve", "weve", "theyve", "id", "youd", "hed", "shed",
    "wed", "theyd", "ill", "youll", "hell", "shell", "well", "theyll",
    "isnt", "arent", "wasnt", "werent", "hasnt", "havent", "hadnt", "doesnt",
    "dont", "didnt", "wont", "wouldnt", "shant", "shouldnt", "cant",
    "cannot", "couldnt", "mustnt", "lets", "thats", "whos", "whats", "heres",
    "theres", "whens", "wheres", "whys", "hows", "an", "the", "but", "if",
    "or", "because", "as", "until", "while", "of", "at", "by", "for", "with",
    "about", "against", "between", "into", "through", "during", "before",
    "after", "above", "below", "to", "from", "up", "down", "in", "out", "on",
    "off", "over", "under", "again", "further", "then", "once", "here",
    "there", "when", "where", "why", "how", "all", "any", "both", "each",
    "few", "more", "most", "other", "some", "such", "no", "nor", "not",
    "only", "own", "same", "so", "than", "too", "very",
)

_EXTRA = (
    "a", "and", "is", "we", "are", "be", "can", "it", "our", "also", "has",
    "been", "they", "was", "will", "their",
)

STOPWORDS: frozenset[str] = frozenset(_SNOWBALL + _EXTRA)


def is_stopword(word: str) -> bool:
    """True if the already lower-cased word is a stopword."""
    return word in STOPWORDS