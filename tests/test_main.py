"""Tests for main module."""

from nutriscore.main import main


def test_main_prints_reference_score(capsys, monkeypatch) -> None:
    """Test that main prints the reference product score and grade."""
    for name in ("DEFAULT_CATEGORY", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    main()

    captured = capsys.readouterr()
    assert "Nutritional score: 2" in captured.out
    assert "NutriScore: B" in captured.out
