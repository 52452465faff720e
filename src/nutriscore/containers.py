"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutriscore.config import Settings
from nutriscore.services.scoring import ScoringService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    scoring_service: ScoringService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    scoring_service = ScoringService(
        default_category=resolved_settings.default_category,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        scoring_service=scoring_service,
    )
