import pandas as pd
from npi_calculator.backend_logic import (
    BAND_THRESHOLDS,
    WORST_BAND,
    NpiInput,
    NpiResult,
    SIZE_COEFFICIENT,
)

# ------------------------
# Form helpers (UI-side)
# ------------------------

GRADE_OPTIONS = {
    1: "Well differentiated",
    2: "Moderately differentiated",
    3: "Poorly differentiated",
}

NODE_STAGE_OPTIONS = {
    1: "No involvement",
    2: "1–3 nodes",
    3: "4+ nodes",
}

# result colour -> Streamlit markdown colour
MARKDOWN_COLOURS = {
    "primary": "green",
    "secondary": "blue",
    "accent": "orange",
    "destructive": "red",
}


def option_label(value, options: dict) -> str:
    return f"{value} - {options[value]}"


def format_number(x: float) -> str:
    """
    Unrounded display text; whole numbers drop the trailing '.0'.
    """
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def describe_calculation(npi_input: NpiInput, result: NpiResult) -> str:
    return (
        f"{format_number(npi_input.tumour_size_cm)} × {SIZE_COEFFICIENT}"
        f" + {npi_input.lymph_node_stage}"
        f" + {npi_input.histological_grade}"
        f" = {format_number(result.score)}"
    )


def survival_caption(result: NpiResult) -> str:
    return f"15-year survival: {result.survival_estimate}"


def band_markdown(result: NpiResult) -> str:
    colour = MARKDOWN_COLOURS.get(result.colour, "gray")
    return f":{colour}[**{result.band}**]"


def band_reference_table() -> pd.DataFrame:
    rows = []
    lower = None
    for upper, band, survival in BAND_THRESHOLDS:
        npi_range = f"≤ {upper}" if lower is None else f"> {lower} to ≤ {upper}"
        rows.append({"NPI": npi_range, "Prognosis": band, "15-year survival": survival})
        lower = upper
    band, survival = WORST_BAND
    rows.append({"NPI": f"> {lower}", "Prognosis": band, "15-year survival": survival})
    return pd.DataFrame(rows)
