"""
Image classifier boundary.

The classification algorithm lives outside this package; the service only
asks whether an image contains a cat above a confidence threshold.
"""

from abc import ABC, abstractmethod
from typing import Any


class ImageClassifier(ABC):
    """Answers whether a camera image contains a cat."""

    @abstractmethod
    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """
        Args:
            image: Camera frame, opaque to the security service
            confidence_threshold: Minimum confidence (percent) to report a cat

        Returns:
            True if a cat was found with at least the given confidence
        """
        pass


class FixedImageClassifier(ImageClassifier):
    """Classifier that always gives the same answer.

    Useful for wiring the service up without a real model.
    """

    def __init__(self, contains_cat: bool = False):
        self.contains_cat = contains_cat
        self.call_count = 0

    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        self.call_count += 1
        return self.contains_cat
