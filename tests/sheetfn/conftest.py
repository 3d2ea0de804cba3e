"""Shared fixtures and utilities for sheetfn tests."""

import pytest

from sheetfn import SheetFn, SheetFnComplexFunction, SheetFnEvaluationContext, SheetFnString, SheetFnValue


@pytest.fixture
def sheetfn():
    """Create a fresh SheetFn instance for each test."""
    return SheetFn()


@pytest.fixture
def context():
    """Evaluation context for a cell at R0C0."""
    return SheetFnEvaluationContext()


@pytest.fixture
def complex_fn():
    """Create a COMPLEX function instance."""
    return SheetFnComplexFunction()


class SheetFnTestHelpers:
    """Helper utilities for sheetfn testing."""

    @staticmethod
    def assert_text(result: SheetFnValue, expected: str) -> None:
        """Assert that a result is text with the expected content."""
        assert isinstance(result, SheetFnString), f"Expected text '{expected}', got {result!r}"
        assert result.value == expected, f"Expected text '{expected}', got '{result.value}'"

    @staticmethod
    def parse_complex_text(text: str, suffix: str) -> tuple[int, int]:
        """Parse integer complex number text such as '3+4i' back into (real, imag)."""
        if text == "":
            return 0, 0

        if not text.endswith(suffix):
            return int(text), 0

        body = text[:-len(suffix)]
        split = max(body.rfind('+'), body.rfind('-'))
        if split > 0:
            real = int(body[:split])
            imag_text = body[split:]

        else:
            real = 0
            imag_text = body

        if imag_text in ("", "+"):
            return real, 1

        return real, int(imag_text)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return SheetFnTestHelpers
