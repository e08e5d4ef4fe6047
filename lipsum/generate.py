import random
import threading
from itertools import islice

from .chain import MarkovChain
from .corpus import CORPORA
from .text import join_title, strip_punctuation

LOREM_IPSUM_START = ("Lorem", "ipsum")

# Title length is drawn from range(TITLE_MIN_WORDS, TITLE_MAX_WORDS).
TITLE_MIN_WORDS = 3
TITLE_MAX_WORDS = 8
TITLE_LONG_WORD = 5

# -----------------------
# Shared default chain
# -----------------------
_chain_cache = {"chain": None}
_chain_lock = threading.Lock()


def default_chain() -> MarkovChain:
    """
    Chain learned from the bundled texts. Built once on first use and
    never modified afterwards.
    """
    chain = _chain_cache["chain"]
    if chain is not None:
        return chain

    with _chain_lock:
        if _chain_cache["chain"] is None:
            chain = MarkovChain()
            # lorem ipsum is the short one, learn it first
            for text in CORPORA.values():
                chain.learn(text)
            _chain_cache["chain"] = chain
    return _chain_cache["chain"]


# -----------------------
# lorem ipsum text
# -----------------------
def lipsum(n: int) -> str:
    """
    Generate n words of lorem ipsum text. The output starts with
    "Lorem ipsum" and turns random once the walk leaves the
    traditional text.
    """
    return lipsum_with_rng(random.Random(), n)


def lipsum_with_rng(rng, n: int) -> str:
    return default_chain().generate_with_rng_from(rng, n, LOREM_IPSUM_START)


def lipsum_from_seed(n: int, seed: int) -> str:
    """Same as lipsum, but reproducible for a given seed."""
    return lipsum_with_rng(random.Random(seed), n)


def lipsum_words(n: int) -> str:
    """Generate n words of lorem ipsum text from a random starting point."""
    return lipsum_words_with_rng(random.Random(), n)


def lipsum_words_with_rng(rng, n: int) -> str:
    return default_chain().generate_with_rng(rng, n)


def lipsum_words_from_seed(n: int, seed: int) -> str:
    return lipsum_words_with_rng(random.Random(seed), n)


# -----------------------
# titles
# -----------------------
def lipsum_title() -> str:
    """Short run of lorem ipsum words in title case, without punctuation."""
    return lipsum_title_with_rng(random.Random())


def lipsum_title_with_rng(rng) -> str:
    n = rng.randrange(TITLE_MIN_WORDS, TITLE_MAX_WORDS)
    words = strip_punctuation(default_chain().iter_words(rng))
    return join_title(islice(words, n), long_word=TITLE_LONG_WORD)
