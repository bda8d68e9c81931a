"""
Tests for parsing complex numbers from text

Covers:
1. Accepted notations (i/j markers, case, signs, decimal comma, exponents)
2. Term count and number errors
3. ParserConfig options, including the legacy sign handling
"""
import logging
import warnings

import pytest

from python_complex import Complex, ParseError, ParserConfig, SignDroppedWarning
from python_complex.core.parsing import parse_complex_text


class TestAcceptedNotations:
    """Text that parses"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3+5i", Complex(3.0, 5.0)),
            ("3+5j", Complex(3.0, 5.0)),
            ("3+5I", Complex(3.0, 5.0)),
            ("-2-4I", Complex(-2.0, -4.0)),
            ("3-5i", Complex(3.0, -5.0)),
            ("3 - 5i", Complex(3.0, -5.0)),
            (" 3 + 5J ", Complex(3.0, 5.0)),
            ("5i", Complex(0.0, 5.0)),
            ("-5i", Complex(0.0, -5.0)),
            ("7", Complex(7.0, 0.0)),
            ("5i+3", Complex(3.0, 5.0)),
            ("3,5+2,25i", Complex(3.5, 2.25)),
            ("1e-3+2.5e+2i", Complex(0.001, 250.0)),
            ("-1.5E-2-4j", Complex(-0.015, -4.0)),
        ]
    )
    def test_parse(self, text: str, expected: Complex) -> None:
        """Notation is converted to real and imaginary part"""
        assert Complex.from_string(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3+", Complex(3.0, 0.0)),
            ("3 +", Complex(3.0, 0.0)),
            ("+3+5i+", Complex(3.0, 5.0)),
            ("3++5i", Complex(3.0, 5.0)),
            ("3+-5i", Complex(3.0, -5.0)),
            ("3 - -5i", Complex(3.0, 5.0)),
            ("-+2 -  4j", Complex(-2.0, -4.0)),
        ]
    )
    def test_sign_runs(self, text: str, expected: Complex) -> None:
        """Adjacent signs collapse into one, a trailing sign is dropped"""
        assert Complex.from_string(text) == expected

    def test_lone_sign_is_no_term(self) -> None:
        """A sign on its own does not count as a term"""
        with pytest.raises(ParseError, match="found 0"):
            Complex.from_string(" - + ")

    def test_later_term_of_same_kind_wins(self) -> None:
        """Two real terms: the last one is kept"""
        assert Complex.from_string("3+4") == Complex(4.0, 0.0)

    def test_function_returns_tuple(self) -> None:
        """parse_complex_text gives the two parts"""
        assert parse_complex_text("1-2j") == (1.0, -2.0)

    def test_tokenization_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The terms are logged at DEBUG level"""
        with caplog.at_level(logging.DEBUG, logger="python_complex.core.parsing"):
            Complex.from_string("3+5i")
        assert "Tokenized" in caplog.text


class TestParseErrors:
    """Text that does not parse"""

    @pytest.mark.parametrize("text", ["a+b+c", "1+2+3i", "", "   ", "1 2 3"])
    def test_wrong_term_count(self, text: str) -> None:
        """Zero or more than two terms"""
        with pytest.raises(ParseError, match="Could not convert"):
            Complex.from_string(text)

    @pytest.mark.parametrize("text", ["x+5i", "3+i", "abc", "3+5x"])
    def test_not_a_number(self, text: str) -> None:
        """A term that is not a number"""
        with pytest.raises(ParseError, match="is not a number") as excinfo:
            Complex.from_string(text)
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_parse_error_is_value_error(self) -> None:
        """ParseError can be caught as ValueError"""
        with pytest.raises(ValueError):
            Complex.from_string("a+b+c")

    def test_non_string(self) -> None:
        """Only str is accepted"""
        with pytest.raises(TypeError):
            Complex.from_string(3)  # type: ignore[arg-type]


class TestParserConfig:
    """Parser options"""

    def test_decimal_comma_off(self) -> None:
        """Without comma replacement "3,5" is no number"""
        with pytest.raises(ParseError):
            Complex.from_string("3,5", ParserConfig(decimal_comma=False))

    def test_custom_imag_marker(self) -> None:
        """Other imaginary markers can be configured"""
        config = ParserConfig(imag_markers="k")
        assert Complex.from_string("2+3K", config) == Complex(2.0, 3.0)
        with pytest.raises(ParseError):
            Complex.from_string("2+3i", config)

    def test_legacy_signs_discards_minus(self) -> None:
        """Legacy mode drops the sign and warns about it"""
        config = ParserConfig(legacy_signs=True)
        with pytest.warns(SignDroppedWarning):
            assert Complex.from_string("3-5i", config) == Complex(3.0, 5.0)
        with pytest.warns(SignDroppedWarning):
            assert Complex.from_string("-2-4I", config) == Complex(2.0, 4.0)

    def test_legacy_signs_without_minus(self) -> None:
        """Legacy mode does not warn when there is nothing to drop"""
        config = ParserConfig(legacy_signs=True)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Complex.from_string("3 + 5j", config) == Complex(3.0, 5.0)

    def test_legacy_signs_term_count(self) -> None:
        """Legacy mode still limits the number of terms"""
        with pytest.raises(ParseError):
            Complex.from_string("a+b+c", ParserConfig(legacy_signs=True))

    def test_legacy_warning_points_at_caller(self) -> None:
        """The warning is attributed to the calling code"""
        config = ParserConfig(legacy_signs=True)
        with pytest.warns(SignDroppedWarning) as record:
            Complex.from_string("3-5i", config)
        assert record[0].filename == __file__
        with pytest.warns(SignDroppedWarning) as record:
            parse_complex_text("3-5i", config)
        assert record[0].filename == __file__
