"""Catpoint Services"""

from .repository import SecurityRepository, InMemorySecurityRepository
from .image_classifier import ImageClassifier, FixedImageClassifier
from .status_listener import StatusListener
from .security_service import SecurityService

__all__ = [
    'SecurityRepository',
    'InMemorySecurityRepository',
    'ImageClassifier',
    'FixedImageClassifier',
    'StatusListener',
    'SecurityService',
]
