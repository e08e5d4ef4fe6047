from .chain import Bigram, MarkovChain, Words
from .corpus import LIBER_PRIMUS, LOREM_IPSUM
from .generate import (
    default_chain,
    lipsum,
    lipsum_from_seed,
    lipsum_title,
    lipsum_title_with_rng,
    lipsum_with_rng,
    lipsum_words,
    lipsum_words_from_seed,
    lipsum_words_with_rng,
)
from .text import capitalize, join_words

__all__ = [
    "Bigram", "MarkovChain", "Words",
    "LOREM_IPSUM", "LIBER_PRIMUS",
    "default_chain",
    "lipsum", "lipsum_with_rng", "lipsum_from_seed",
    "lipsum_words", "lipsum_words_with_rng", "lipsum_words_from_seed",
    "lipsum_title", "lipsum_title_with_rng",
    "capitalize", "join_words",
]
