"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import json_deep_equal

    assert json_deep_equal.__version__ is not None
    assert json_deep_equal.__version__ == "0.1.0"
