import string
from typing import Iterable

# Punctuation characters which end a sentence.
SENTENCE_END = (".", "!", "?")


def capitalize(word: str) -> str:
    """Upper-case the first character of word, keep the rest."""
    return word[:1].upper() + word[1:]


def join_words(words: Iterable[str], bare: bool = False) -> str:
    """
    Join words into sentences.

    The first word and every word after one ending in ".", "!" or "?" is
    capitalized, and the text always ends in one of those. Trailing ASCII
    punctuation is dropped before adding the final "." so "amet," turns
    into "amet." and not "amet,.".

    With bare=True the words are only joined by single spaces.
    """
    words = iter(words)
    if bare:
        return " ".join(words)

    first = next(words, None)
    if first is None:
        return ""

    sentence = capitalize(first)
    needs_cap = sentence.endswith(SENTENCE_END)

    parts = [sentence]
    for word in words:
        parts.append(capitalize(word) if needs_cap else word)
        needs_cap = word.endswith(SENTENCE_END)
    sentence = " ".join(parts)

    if not sentence.endswith(SENTENCE_END):
        sentence = sentence.rstrip(string.punctuation) + "."
    return sentence


def join_title(words: Iterable[str], long_word: int = 5) -> str:
    """
    Title case a run of words: capitalize the first word and every word
    longer than long_word characters. No terminal punctuation is added.
    """
    title = []
    for word in words:
        if not title or len(word) > long_word:
            word = capitalize(word)
        title.append(word)
    return " ".join(title)


def strip_punctuation(words: Iterable[str]) -> Iterable[str]:
    """Yield words with surrounding ASCII punctuation removed, skipping empties."""
    for word in words:
        word = word.strip(string.punctuation)
        if word:
            yield word
