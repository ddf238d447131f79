"""Helpers built on top of the rational core."""

from .ranges import IntRange, aspect_range, for_width, symmetric_aspect_range
from .weighted_choice import weighted_random_choice, weighted_random_choice_by

__all__ = [
    "IntRange",
    "for_width",
    "aspect_range",
    "symmetric_aspect_range",
    "weighted_random_choice",
    "weighted_random_choice_by",
]
