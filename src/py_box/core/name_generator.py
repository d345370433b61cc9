"""Seeded memorable name generator.

Names look like ``"swift otter"`` or, with numbers and a dash separator,
``"swift-otter-42"``. A generator built from the same seed always produces
the same sequence of names.
"""

import logging
import random
from functools import lru_cache
from importlib import resources
from typing import Callable, Optional, Sequence

import yaml

from .exceptions import ConfigError
from .models import NameGeneratorConfig, WordLists

logger = logging.getLogger(__name__)

# A pseudo-random stream: each call returns the next float in [0, 1)
RandomStream = Callable[[], float]

WORDS_RESOURCE = "words.yaml"


def default_seed() -> int:
    """Return a fresh 64-bit seed for generators built without one."""
    return random.SystemRandom().getrandbits(64)


@lru_cache(maxsize=1)
def load_word_lists() -> WordLists:
    """Load the packaged adjective and animal vocabularies.

    The lists are read once per process and shared by every generator.

    Raises:
        ConfigError: If the packaged word file is missing or malformed
    """
    try:
        text = resources.files("py_box.assets").joinpath(WORDS_RESOURCE).read_text(
            encoding="utf-8"
        )
        data = yaml.safe_load(text) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load word lists: {e}") from e

    adjectives = data.get("adjectives") or []
    animals = data.get("animals") or []
    if not adjectives or not animals:
        raise ConfigError(f"Word lists in {WORDS_RESOURCE} must not be empty")

    logger.debug(f"Loaded {len(adjectives)} adjectives and {len(animals)} animals")
    return WordLists(
        adjectives=tuple(str(w) for w in adjectives),
        animals=tuple(str(w) for w in animals),
    )


def _capitalize(word: str) -> str:
    # str.capitalize() would lowercase the rest of the word
    return word[:1].upper() + word[1:]


class NameGenerator:
    """Draws adjective + animal names from a seeded pseudo-random stream.

    Example:
        gen = NameGenerator(NameGeneratorConfig(seed=42, separator="-"))
        gen.next()  # same value on every run with seed 42

    Instances are not thread-safe; each owns its stream cursor.
    """

    def __init__(
        self,
        config: Optional[NameGeneratorConfig] = None,
        words: Optional[WordLists] = None,
        stream: Optional[RandomStream] = None,
    ):
        """Initialize NameGenerator.

        Args:
            config: Generator settings (default: unseeded, space separator)
            words: Vocabularies to draw from (default: packaged word lists)
            stream: Float source in [0, 1) replacing the seeded default
        """
        config = config or NameGeneratorConfig()
        if config.seed is None:
            self.seed = default_seed()
        else:
            self.seed = config.seed

        self.separator = config.separator
        self.capitalize = config.capitalize
        self.add_numbers = config.add_numbers
        self.words = words or load_word_lists()

        if stream is None:
            stream = random.Random(self.seed).random
        self._next_random = stream

    def _pick(self, items: Sequence[str]) -> str:
        return items[int(self._next_random() * len(items))]

    def next(self) -> str:
        """Generate the next name in the sequence.

        Returns:
            A name in the format ``{adjective}{sep}{animal}[{sep}{0-99}]``
        """
        adjective = self._pick(self.words.adjectives)
        animal = self._pick(self.words.animals)

        if self.capitalize:
            adjective = _capitalize(adjective)
            animal = _capitalize(animal)

        name = f"{adjective}{self.separator}{animal}"

        if self.add_numbers:
            number = int(self._next_random() * 100)
            name = f"{name}{self.separator}{number}"

        return name

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.next()
