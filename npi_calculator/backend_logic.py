import logging
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np

logger = logging.getLogger(__name__)

# ------------------------
# Constants
# ------------------------
SIZE_COEFFICIENT = 0.2

# (upper bound inclusive, band, 15-year survival)
BAND_THRESHOLDS = [
    (2.4, "Excellent", "95%"),
    (3.4, "Good", "85%"),
    (5.4, "Moderate", "70%"),
]
WORST_BAND = ("Poor", "50%")

BAND_COLOURS = {
    "Excellent": "primary",
    "Good": "secondary",
    "Moderate": "accent",
    "Poor": "destructive",
}

GRADE_MIN, GRADE_MAX = 1, 3
NODE_STAGE_MIN, NODE_STAGE_MAX = 1, 3


# ------------------------
# Errors
# ------------------------
class NpiValidationError(ValueError):
    field = ""
    message = ""

    def __init__(self, raw=None):
        self.raw = raw
        super().__init__(self.message)


class InvalidTumourSize(NpiValidationError):
    field = "tumour_size"
    message = "Please enter a valid tumour size"


class InvalidGrade(NpiValidationError):
    field = "grade"
    message = "Please select a histological grade"


class InvalidNodeStage(NpiValidationError):
    field = "node_stage"
    message = "Please select a lymph node status"


# ------------------------
# Records
# ------------------------
@dataclass(frozen=True)
class NpiInput:
    tumour_size_cm: float
    histological_grade: int
    lymph_node_stage: int


@dataclass(frozen=True)
class NpiResult:
    score: float
    band: str
    survival_estimate: str
    colour: str


# ------------------------
# Validation
# ------------------------
def _to_float(raw) -> float:
    """
    Coerce a raw form value (str or number) to a float.
    Missing, blank, boolean or non-numeric values come back as NaN.
    """
    if raw is None or isinstance(raw, (bool, np.bool_)):
        return np.nan
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return np.nan
    try:
        return float(raw)
    except (TypeError, ValueError, OverflowError):
        return np.nan


def _to_int_in_range(raw, lo: int, hi: int):
    value = _to_float(raw)
    if not np.isfinite(value) or value != int(value):
        return None
    value = int(value)
    if value < lo or value > hi:
        return None
    return value


def _parse_size(raw_size):
    size = _to_float(raw_size)
    if not np.isfinite(size) or size <= 0:
        raise InvalidTumourSize(raw_size)
    return size


def _parse_grade(raw_grade):
    grade = _to_int_in_range(raw_grade, GRADE_MIN, GRADE_MAX)
    if grade is None:
        raise InvalidGrade(raw_grade)
    return grade


def _parse_node_stage(raw_node_stage):
    node_stage = _to_int_in_range(raw_node_stage, NODE_STAGE_MIN, NODE_STAGE_MAX)
    if node_stage is None:
        raise InvalidNodeStage(raw_node_stage)
    return node_stage


def validate(raw_size, raw_grade, raw_node_stage) -> NpiInput:
    """
    Turn raw form values into an NpiInput.

    Checks run in the order size, grade, node stage and the first failure is
    raised as InvalidTumourSize, InvalidGrade or InvalidNodeStage.
    """
    size = _parse_size(raw_size)
    grade = _parse_grade(raw_grade)
    node_stage = _parse_node_stage(raw_node_stage)
    return NpiInput(
        tumour_size_cm=size,
        histological_grade=grade,
        lymph_node_stage=node_stage,
    )


def collect_validation_errors(raw_size, raw_grade, raw_node_stage) -> List[NpiValidationError]:
    errors = []
    for parse, raw in (
        (_parse_size, raw_size),
        (_parse_grade, raw_grade),
        (_parse_node_stage, raw_node_stage),
    ):
        try:
            parse(raw)
        except NpiValidationError as e:
            errors.append(e)
    return errors


# ------------------------
# Core logic
# ------------------------
def npi_score(npi_input: NpiInput) -> float:
    return (
        SIZE_COEFFICIENT * npi_input.tumour_size_cm
        + npi_input.lymph_node_stage
        + npi_input.histological_grade
    )


def classify_score(score: float) -> Tuple[str, str]:
    """
    score -> (band, 15-year survival estimate)

    Upper bounds are inclusive and the raw score is compared unrounded.
    """
    for upper, band, survival in BAND_THRESHOLDS:
        if score <= upper:
            return band, survival
    return WORST_BAND


def compute(npi_input: NpiInput) -> NpiResult:
    score = npi_score(npi_input)
    band, survival = classify_score(score)
    result = NpiResult(
        score=score,
        band=band,
        survival_estimate=survival,
        colour=BAND_COLOURS[band],
    )
    logger.debug(
        "NPI %r (size=%r, grade=%r, node_stage=%r) -> %s",
        score,
        npi_input.tumour_size_cm,
        npi_input.histological_grade,
        npi_input.lymph_node_stage,
        band,
    )
    return result


def calculate_npi(raw_size, raw_grade, raw_node_stage) -> NpiResult:
    return compute(validate(raw_size, raw_grade, raw_node_stage))
