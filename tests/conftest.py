import pytest

from kellycalc.settings import settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Every test starts from the shipped defaults, whatever the environment says."""
    monkeypatch.setattr(settings, "precision", 2)
    monkeypatch.setattr(settings, "min_fraction", 0.0)
    monkeypatch.setattr(settings, "verbose", False)
