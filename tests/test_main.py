"""
Tests for main.py

Smoke test that the bootstrap entry point runs and reports each utility group.
"""

from main import main
from src.config.settings import RANDOM_SEED_ENV_VAR


def test_main_prints_bootstrap_summary(capsys, monkeypatch):
    """Test the bootstrap output includes the seed and sample results."""
    monkeypatch.setenv(RANDOM_SEED_ENV_VAR, "7")
    main()
    out = capsys.readouterr().out

    assert "collection_utils bootstrap complete" in out
    assert "random seed: 7" in out
    assert "a,b,c" in out
    assert "{'hours': 1, 'minutes': 30}" in out
    assert "[20, 30, 100]" in out
