"""Tests for container wiring."""

from nutriscore.config import Settings
from nutriscore.containers import build_container
from nutriscore.domain.scoring import ProductCategory


def test_build_container_creates_services() -> None:
    settings = Settings(
        _env_file=None, default_category=ProductCategory.CHEESE, debug=True
    )

    container = build_container(settings)

    assert container.settings is settings
    assert container.scoring_service.default_category is ProductCategory.CHEESE
    assert container.scoring_service.debug is True
