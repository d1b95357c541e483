"""Day 7: ranking Camel Cards hands with jokers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from aoc2023.common import read_lines

_CARD_ORDER = "J23456789TQKA"


class HandType(IntEnum):
    """Kinds of hand, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


@dataclass(frozen=True)
class Hand:
    """A parsed hand with its bid and its kind."""

    hand: str
    counts: dict[str, int]
    jokers: int
    bid: int
    value: HandType

    def sort_key(self) -> tuple[int, list[int]]:
        """Key ordering hands by kind, then card by card."""
        return self.value, [card_value(card) for card in self.hand]


def card_value(card: str) -> int:
    """Return a card's strength, jokers being the weakest."""
    index = _CARD_ORDER.find(card)
    if len(card) != 1 or index == -1:
        raise ValueError(f"Unknown card: {card!r}")
    return index


def classify(counts: dict[str, int], jokers: int) -> HandType:
    """Return the best kind of hand the card counts make with the jokers added."""
    sizes = sorted(counts.values(), reverse=True)
    if sizes:
        sizes[0] += jokers
    else:
        sizes = [jokers]

    score = HandType.HIGH_CARD
    for size in sizes:
        if size == 5:
            score = HandType.FIVE_OF_A_KIND
        elif size == 4:
            score = HandType.FOUR_OF_A_KIND
        elif size == 3:
            score = HandType.THREE_OF_A_KIND
        elif size == 2 and score == HandType.HIGH_CARD:
            score = HandType.ONE_PAIR
        elif size == 2 and score == HandType.ONE_PAIR:
            score = HandType.TWO_PAIR
        elif size == 2 and score == HandType.THREE_OF_A_KIND:
            score = HandType.FULL_HOUSE
    return score


def parse_hand(line: str) -> Hand:
    """Parse a line holding a hand and its bid, separated by a space."""
    parts = line.split(" ")
    if len(parts) < 2:
        raise ValueError(f"Missing bid in line: {line}")
    hand = parts[0]
    bid = int(parts[1])
    counts = dict(Counter(card for card in hand if card != "J"))
    jokers = hand.count("J")
    return Hand(hand, counts, jokers, bid, classify(counts, jokers))


def part2(lines: Iterable[str]) -> int:
    """Total winnings: each bid times the rank of its hand."""
    hands = sorted((parse_hand(line) for line in lines if line), key=Hand.sort_key)
    return sum(rank * hand.bid for rank, hand in enumerate(hands, start=1))


def run(path) -> int:
    """Solve the puzzle for the input file and print the result."""
    result = part2(read_lines(path))
    print(f"Day07 result2: {result}")
    return result