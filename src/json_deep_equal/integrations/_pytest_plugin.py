"""pytest plugin for json-deep-equal.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_deep_equal import DeepEqualConfig, diff


@pytest.fixture(scope="session")
def assert_json_equal() -> Any:
    """Fixture that returns a callable deep JSON equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to diff() which creates a fresh JsonComparator per call).

    Usage in tests::

        def test_payload(assert_json_equal):
            assert_json_equal({"tags": ["a", "b"]}, {"tags": ["b", "a"]})

        def test_missing_key(assert_json_equal):
            with pytest.raises(AssertionError, match=r"missing in target"):
                assert_json_equal({"a": 1, "b": 2}, {"a": 1})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DeepEqualConfig | None = None,
    ) -> None:
        """Assert that two JSON documents are deeply equal.

        Args:
            actual:   The actual JSON object produced by the code under test.
            expected: The expected/reference JSON object.
            config:   Optional DeepEqualConfig for custom comparison options.

        Raises:
            AssertionError: When any discrepancy is found, with one line per
                discrepancy.  Discrepancy paths are relative to ``actual``
                (the source) and ``expected`` (the target).
        """
        result = diff(actual, expected, config=config)
        if not result.equal:
            lines = "\n".join(f"  - {d.detail}" for d in result.discrepancies)
            raise AssertionError(
                f"JSON documents not equal: "
                f"{len(result.discrepancies)} discrepancies\n{lines}"
            )

    return _assert
