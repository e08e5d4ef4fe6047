import random
from itertools import islice
from typing import Dict, Iterator, List, Optional, Tuple

from .text import join_words

Bigram = Tuple[str, str]


class MarkovChain:
    """
    Order two Markov chain over whitespace separated words.

    Every bigram (two consecutive words) maps to the list of words seen
    right after it. Repeated successors are kept, so a uniform choice over
    the list is weighted by how often each word followed the bigram.
    """

    def __init__(self):
        self.map: Dict[Bigram, List[str]] = {}
        self.keys: List[Bigram] = []

    def __len__(self):
        return len(self.map)

    def is_empty(self) -> bool:
        return not self.map

    def learn(self, text: str):
        """
        text: str (case and punctuation are kept as-is)

        Can be called several times to build up the chain.
        """
        words = text.split()
        for a, b, c in zip(words, words[1:], words[2:]):
            self.map.setdefault((a, b), []).append(c)

        # sorted so a seeded rng walks the chain the same way every run
        self.keys = sorted(self.map)

    def words(self, state: Bigram) -> Optional[List[str]]:
        """Words following the given bigram, or None if it was never seen."""
        return self.map.get(tuple(state))

    def iter_words(self, rng=None) -> "Words":
        """Never-ending iterator starting at a random point in the chain."""
        rng = rng or random.Random()
        state = rng.choice(self.keys) if self.keys else ("", "")
        return Words(self.map, self.keys, state, rng)

    def iter_words_from(self, start: Bigram, rng=None) -> "Words":
        """Never-ending iterator starting at the given bigram."""
        return Words(self.map, self.keys, tuple(start), rng or random.Random())

    def generate(self, n: int) -> str:
        """Generate n words of text from a random starting point."""
        return self.generate_with_rng(random.Random(), n)

    def generate_with_rng(self, rng, n: int) -> str:
        _check_count(n)
        return join_words(islice(self.iter_words(rng), n))

    def generate_from(self, n: int, start: Bigram) -> str:
        """Generate n words of text starting at the given bigram."""
        return self.generate_with_rng_from(random.Random(), n, start)

    def generate_with_rng_from(self, rng, n: int, start: Bigram) -> str:
        _check_count(n)
        return join_words(islice(self.iter_words_from(start, rng), n))


class Words:
    """
    Iterator walking a Markov chain.

    Each step yields the first word of the current bigram. If the bigram
    is not in the chain, the walk jumps to a random known bigram before
    picking the next word, so a dead end only redirects the continuation.
    """

    def __init__(self, chain_map, keys, state, rng):
        self.map = chain_map
        self.keys = keys
        self.state = state
        self.rng = rng

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if not self.map:
            raise StopIteration

        result = self.state[0]
        while self.state not in self.map:
            self.state = self.rng.choice(self.keys)

        nxt = self.rng.choice(self.map[self.state])
        self.state = (self.state[1], nxt)
        return result


def _check_count(n: int):
    if n < 0:
        raise ValueError(f"word count must be non-negative, got {n}")
