"""Demo entrypoint scoring a reference product."""

from nutriscore.app_logging import configure_logging
from nutriscore.config import parse_log_level
from nutriscore.containers import build_container
from nutriscore.domain.scoring import NutritionalInput
from nutriscore.services.scoring import energy_from_kcal

REFERENCE_PRODUCT = NutritionalInput(
    energy_kj=energy_from_kcal(0),
    sugars_g=10,
    saturated_fat_g=2,
    sodium_mg=500,
    fruit_percent=60,
    fibre_g=4,
    protein_g=2,
)


def main() -> None:
    """Print the score and grade of the reference product."""
    container = build_container()
    configure_logging(parse_log_level(container.settings.log_level))
    report = container.scoring_service.evaluate(REFERENCE_PRODUCT)
    print(f"Nutritional score: {report.result.value}")
    print(f"NutriScore: {report.grade.value}")


if __name__ == "__main__":
    main()
