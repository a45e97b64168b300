"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_coordinator import (
    TRANSLATION_ERROR_MESSAGE,
    TranslationCoordinator,
    truncate_error_detail,
)
from .app_coordinator import AppCoordinator

__all__ = [
    "AppCoordinator",
    "TranslationCoordinator",
    "TRANSLATION_ERROR_MESSAGE",
    "truncate_error_detail",
]
