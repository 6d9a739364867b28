"""7-bag randomizer module"""
import random
from typing import List, Optional


class BagRandom:
    """
    Shuffled-bag piece generator.

    Each refill is a fresh permutation of all seven kinds, so every kind shows
    up exactly once per bag and a repeat can only straddle two bags.
    """

    PIECES = ["I","O","T","S","Z","J","L"]

    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed)
        self.bag: List[str] = []

    def _refill(self):
        bag = list(self.PIECES)
        self.random.shuffle(bag)
        self.bag = bag

    def next_piece(self) -> str:
        if not self.bag:
            self._refill()
        return self.bag.pop(0)
