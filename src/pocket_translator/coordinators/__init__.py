"""Coordinators - Orchestration layer connecting the view with business logic."""

from .translator_coordinator import TranslatorCoordinator

__all__ = [
    "TranslatorCoordinator",
]
