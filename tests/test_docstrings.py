"""Tests that the interactive examples in the package docstrings run.

Examples that need files or data from outside the package are written as
fenced code blocks instead, so every ``>>>`` example must pass as-is.
"""

import doctest
import importlib

import pytest

MODULES_WITH_EXAMPLES = [
    "front_metrics",
    "front_metrics.point",
    "front_metrics.comparators",
    "front_metrics.distance",
    "front_metrics.front",
    "front_metrics.front_utils",
    "front_metrics.solution",
    "front_metrics.indicators.generalized_spread",
]


class TestDocstringExamples:
    """Tests for the ``>>>`` examples in module, class and function docstrings."""

    @pytest.mark.parametrize("module_name", MODULES_WITH_EXAMPLES)
    def test_examples_pass(self, module_name: str) -> None:
        """Every example runs and prints what its docstring shows."""
        module = importlib.import_module(module_name)
        results = doctest.testmod(module, verbose=False, report=False)
        assert results.attempted > 0
        assert results.failed == 0

    @pytest.mark.parametrize("module_name", ["front_metrics", "front_metrics.batch"])
    def test_file_based_examples_are_not_interactive(self, module_name: str) -> None:
        """Examples reading external files are shown as code, not run as doctests."""
        module = importlib.import_module(module_name)
        examples = [
            example.source
            for test in doctest.DocTestFinder().find(module)
            for example in test.examples
        ]
        assert not any(".pf" in source for source in examples)
