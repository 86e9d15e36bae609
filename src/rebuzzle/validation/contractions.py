"""English contraction expansion for lenient answer comparison."""

from __future__ import annotations

import re


CONTRACTION_MAP: dict[str, str] = {
    "you're": "you are",
    "youre": "you are",
    "you'll": "you will",
    "youll": "you will",
    "you've": "you have",
    "youve": "you have",
    "you'd": "you would",
    "youd": "you would",
    "i'm": "i am",
    "im": "i am",
    "i've": "i have",
    "ive": "i have",
    "i'll": "i will",
    "i'd": "i would",
    "we're": "we are",
    "we've": "we have",
    "weve": "we have",
    "we'll": "we will",
    "they're": "they are",
    "theyre": "they are",
    "they've": "they have",
    "theyve": "they have",
    "they'll": "they will",
    "theyll": "they will",
    "it's": "it is",
    "that's": "that is",
    "thats": "that is",
    "there's": "there is",
    "theres": "there is",
    "what's": "what is",
    "whats": "what is",
    "who's": "who is",
    "whos": "who is",
    "here's": "here is",
    "heres": "here is",
    "can't": "cannot",
    "cant": "cannot",
    "won't": "will not",
    "wont": "will not",
    "don't": "do not",
    "dont": "do not",
    "doesn't": "does not",
    "doesnt": "does not",
    "didn't": "did not",
    "didnt": "did not",
    "isn't": "is not",
    "isnt": "is not",
    "aren't": "are not",
    "arent": "are not",
    "wasn't": "was not",
    "wasnt": "was not",
    "weren't": "were not",
    "werent": "were not",
    "haven't": "have not",
    "havent": "have not",
    "hasn't": "has not",
    "hasnt": "has not",
    "hadn't": "had not",
    "hadnt": "had not",
    "wouldn't": "would not",
    "wouldnt": "would not",
    "couldn't": "could not",
    "couldnt": "could not",
    "shouldn't": "should not",
    "shouldnt": "should not",
    "let's": "let us",
    "how's": "how is",
    "hows": "how is",
    "where's": "where is",
    "wheres": "where is",
    "when's": "when is",
    "whens": "when is",
}

# Apostrophe-less spellings that are also ordinary words ("its", "well",
# "were", "ill", "id", "lets") are left out so real answers are not rewritten.

IGNORABLE_WORDS = ("a", "an", "the")

_CONTRACTION_RE = re.compile(
    r"(?<![\w'])("
    + "|".join(re.escape(key) for key in sorted(CONTRACTION_MAP, key=len, reverse=True))
    + r")(?![\w'])",
    re.IGNORECASE,
)


def expand_contractions(text: str) -> str:
    """Spell out whole-word contractions; the rest of ``text`` keeps its case."""

    straightened = text.replace("’", "'")
    return _CONTRACTION_RE.sub(lambda match: CONTRACTION_MAP[match.group(1).lower()], straightened)
