import pytest

from npi_calculator.backend_logic import NpiInput, calculate_npi, compute
from npi_calculator.io_form import (
    GRADE_OPTIONS,
    NODE_STAGE_OPTIONS,
    band_markdown,
    band_reference_table,
    describe_calculation,
    format_number,
    option_label,
    survival_caption,
)


def test_option_labels():
    assert [option_label(v, GRADE_OPTIONS) for v in GRADE_OPTIONS] == [
        "1 - Well differentiated",
        "2 - Moderately differentiated",
        "3 - Poorly differentiated",
    ]
    assert [option_label(v, NODE_STAGE_OPTIONS) for v in NODE_STAGE_OPTIONS] == [
        "1 - No involvement",
        "2 - 1–3 nodes",
        "3 - 4+ nodes",
    ]


@pytest.mark.parametrize("score, expected", [
    (7.0, "7"),
    (3.4, "3.4"),
    (2.2, "2.2"),
    (0.1 + 0.2, "0.30000000000000004"),
])
def test_format_number_is_unrounded(score, expected):
    assert format_number(score) == expected


def test_describe_calculation():
    npi_input = NpiInput(2.0, 2, 1)
    assert describe_calculation(npi_input, compute(npi_input)) == "2 × 0.2 + 1 + 2 = 3.4"

    npi_input = NpiInput(2.5, 3, 2)
    assert describe_calculation(npi_input, compute(npi_input)) == "2.5 × 0.2 + 2 + 3 = 5.5"


def test_survival_caption():
    assert survival_caption(calculate_npi(1.0, 1, 1)) == "15-year survival: 95%"
    assert survival_caption(calculate_npi(5.0, 3, 3)) == "15-year survival: 50%"


@pytest.mark.parametrize("raw, expected", [
    ((1.0, 1, 1), ":green[**Excellent**]"),
    ((2.0, 2, 1), ":blue[**Good**]"),
    ((3.0, 2, 2), ":orange[**Moderate**]"),
    ((5.0, 3, 3), ":red[**Poor**]"),
])
def test_band_markdown(raw, expected):
    assert band_markdown(calculate_npi(*raw)) == expected


def test_band_reference_table():
    df = band_reference_table()
    assert list(df.columns) == ["NPI", "Prognosis", "15-year survival"]
    assert df["Prognosis"].tolist() == ["Excellent", "Good", "Moderate", "Poor"]
    assert df["15-year survival"].tolist() == ["95%", "85%", "70%", "50%"]
    assert df["NPI"].tolist() == ["≤ 2.4", "> 2.4 to ≤ 3.4", "> 3.4 to ≤ 5.4", "> 5.4"]
