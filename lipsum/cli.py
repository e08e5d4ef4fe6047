import argparse
import random

from .generate import (
    lipsum,
    lipsum_from_seed,
    lipsum_title,
    lipsum_title_with_rng,
    lipsum_words,
    lipsum_words_from_seed,
)

DEFAULT_WORD_COUNT = 25


def _non_negative(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"word count must be non-negative: {value}")
    return n


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate lorem ipsum filler text.")
    parser.add_argument("count", nargs="?", type=_non_negative, default=DEFAULT_WORD_COUNT,
                        help=f"Number of words to generate (default: {DEFAULT_WORD_COUNT})")
    parser.add_argument("--words", action="store_true",
                        help="Start at a random point instead of 'Lorem ipsum'")
    parser.add_argument("--title", action="store_true", help="Print a short title instead")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    args = parser.parse_args(argv)

    if args.title:
        if args.seed is None:
            text = lipsum_title()
        else:
            text = lipsum_title_with_rng(random.Random(args.seed))
    elif args.words:
        text = lipsum_words(args.count) if args.seed is None else lipsum_words_from_seed(args.count, args.seed)
    else:
        text = lipsum(args.count) if args.seed is None else lipsum_from_seed(args.count, args.seed)

    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
