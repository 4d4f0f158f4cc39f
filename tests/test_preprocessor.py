from __future__ import annotations

import pytest

from ocrs_parser.core.const import MAX_INPUT_LENGTH
from ocrs_parser.core.exceptions import EmptyInputError, InputError, InputTooLargeError
from ocrs_parser.domain.models import FormatTier
from ocrs_parser.domain.pipeline.preprocessor import detect_format, normalize_text, preprocess


@pytest.mark.parametrize("raw", ["", "   ", "\n\t \n"])
def test_blank_input_is_rejected(raw: str) -> None:
    with pytest.raises(EmptyInputError) as exc_info:
        preprocess(raw)
    assert isinstance(exc_info.value, InputError)
    assert exc_info.value.error_code == "EMPTY_INPUT"
    assert exc_info.value.http_status == 400


def test_oversized_input_is_rejected_after_trim() -> None:
    with pytest.raises(InputTooLargeError) as exc_info:
        preprocess("a" * (MAX_INPUT_LENGTH + 1))
    assert exc_info.value.http_status == 413
    assert exc_info.value.details == {
        "max_length": MAX_INPUT_LENGTH,
        "actual_length": MAX_INPUT_LENGTH + 1,
    }
    assert str(MAX_INPUT_LENGTH) in exc_info.value.message


def test_length_is_measured_after_trim() -> None:
    raw = "  " + "a" * MAX_INPUT_LENGTH + "\n\n"
    result = preprocess(raw)
    assert len(result.text) == MAX_INPUT_LENGTH


def test_typographic_quotes_become_ascii() -> None:
    result = preprocess("“Aged” cheese ‘wheel’ „one‟ ‚two‛")
    assert result.text == "\"Aged\" cheese 'wheel' \"one\" 'two'"


def test_newline_runs_collapse_to_one_blank_line() -> None:
    assert normalize_text("Title\n\n\n\n\nBody") == "Title\n\nBody"


def test_single_and_double_newlines_survive() -> None:
    assert normalize_text("a\nb\n\nc") == "a\nb\n\nc"


def test_space_and_tab_runs_collapse_without_touching_newlines() -> None:
    assert normalize_text("Heat  the \t milk\n  to 31C") == "Heat the milk\n to 31C"


def test_unicode_is_composed() -> None:
    decomposed = "Cre\u0301me frai\u0302che"
    assert preprocess(decomposed).text == "Cr\u00e9me fra\u00eeche"


def test_normalization_is_idempotent() -> None:
    raw = "  “Brie”\n\n\n\nHeat   milk\t\tgently.  "
    once = preprocess(raw).text
    assert preprocess(once).text == once


def test_two_section_markers_mean_structured(structured_text: str) -> None:
    assert preprocess(structured_text).format is FormatTier.STRUCTURED


def test_markers_are_case_insensitive() -> None:
    assert detect_format("INGREDIENTS: milk, rennet\nMETHOD: heat and stir") is FormatTier.STRUCTURED


def test_one_marker_is_semi_structured() -> None:
    text = "You will need milk and rennet.\nDirections: heat the milk and stir in rennet."
    assert detect_format(text) is FormatTier.SEMI_STRUCTURED


def test_bullet_list_is_semi_structured() -> None:
    assert detect_format("Fresh cheese\n- milk\n- lemon juice") is FormatTier.SEMI_STRUCTURED


def test_numbered_list_is_semi_structured() -> None:
    assert detect_format("Heat it up.\n1) Warm milk\n2) Add acid") is FormatTier.SEMI_STRUCTURED


def test_titled_paragraphs_are_semi_structured() -> None:
    text = (
        "Grandma's Ricotta\n\n"
        "Warm the milk slowly in a heavy pot.\n\n"
        "Add vinegar and let the curds form."
    )
    assert detect_format(text) is FormatTier.SEMI_STRUCTURED


def test_title_with_period_does_not_count() -> None:
    text = (
        "Warm the milk first.\n\n"
        "Add vinegar and let the curds form.\n\n"
        "Drain through cloth."
    )
    assert detect_format(text) is FormatTier.UNSTRUCTURED


def test_two_paragraphs_are_not_enough_for_a_title() -> None:
    text = "Grandma's Ricotta\n\nWarm the milk and add vinegar."
    assert detect_format(text) is FormatTier.UNSTRUCTURED


def test_plain_prose_is_unstructured() -> None:
    text = "Warm a gallon of milk, add some lemon juice, wait until it curdles and strain it."
    assert preprocess(text).format is FormatTier.UNSTRUCTURED


def test_marker_needs_a_colon() -> None:
    text = "Follow the method my grandmother used and skip no steps along the way."
    assert detect_format(text) is FormatTier.UNSTRUCTURED
