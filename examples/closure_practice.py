"""Closures passed to filter, sorted and map, then to generate()."""

import random

from playkit import (
    LUCKY_NUMBERS,
    generate,
    is_multiple_of,
    lucky_label,
    roller,
    roller_from_settings,
    sort_pinned_first,
)
from playkit.config import PlaygroundSettings


def generate_number() -> int:
    return random.randint(1, 20)


def main() -> None:
    settings = PlaygroundSettings()

    evens = list(filter(is_multiple_of(2), LUCKY_NUMBERS))
    print(evens)

    print(sort_pinned_first(LUCKY_NUMBERS, pinned=settings.lucky_number))

    print(list(map(lucky_label, LUCKY_NUMBERS)))

    # Inline producer vs. a named function passed by reference
    print(generate(5, roller(1, 20)))
    print(generate(10, generate_number))
    print(generate(3, roller_from_settings(settings)))


if __name__ == "__main__":
    main()
