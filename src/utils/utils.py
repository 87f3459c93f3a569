"""
Common utility functions used by various packages
"""

import random


def lerp(start: float, end: float, time: float) -> float:
    """
    Linear interpolation between start and end by the fraction time
    """
    return start * (1 - time) + end * time


def random_orientation(rng: random.Random) -> int:
    """
    Pick -1 or 1 with equal probability
    """
    return 2 ** rng.randint(1, 2) - 3
