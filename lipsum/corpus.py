from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent / "data"


def _read(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


# The traditional lorem ipsum text. On its own every bigram has a single
# successor, so a chain built from it only replays the text.
LOREM_IPSUM = _read("lorem-ipsum.txt")

# Opening of the first book of Cicero's De finibus bonorum et malorum,
# which the lorem ipsum text is a scrambled subset of.
LIBER_PRIMUS = _read("liber-primus.txt")

CORPORA = {
    "lorem-ipsum": LOREM_IPSUM,
    "liber-primus": LIBER_PRIMUS,
}
