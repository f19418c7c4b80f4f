import logging
from typing import List

from fastapi import HTTPException

from ..schemas import FootprintInput

logger = logging.getLogger(__name__)

NON_NEGATIVE_FIELDS = {
    "transport": (
        "carKm",
        "carAge",
        "publicTransportKm",
        "flightsShortHaul",
        "flightsMediumHaul",
        "flightsLongHaul",
    ),
    "energy": ("homeSize", "electricityKwh", "heatingConsumption"),
    "lifestyle": ("waterConsumption",),
}

MAX_CAR_AGE = 30
MEAT_FREQUENCIES = range(1, 5)

PERCENTAGE_FIELDS = {
    "energy": ("renewablePercentage",),
    "lifestyle": ("localFoodPercentage",),
    "lifestyle.shoppingHabits": ("clothes", "electronics", "furniture"),
}


def _section(payload: FootprintInput, path: str):
    section = payload
    for part in path.split("."):
        section = getattr(section, part)
    return section


def find_out_of_range(payload: FootprintInput) -> List[str]:
    """Describe every numeric field outside the range the formulas expect.

    The calculators accept any value; this check exists for callers that
    want to refuse input that would yield negative or inflated emissions.
    """
    problems: List[str] = []

    for path, fields in NON_NEGATIVE_FIELDS.items():
        section = _section(payload, path)
        for name in fields:
            value = getattr(section, name)
            if value < 0:
                problems.append(f"{path}.{name} must be >= 0 (got {value})")

    if payload.transport.carPassengers < 1:
        problems.append(
            f"transport.carPassengers must be >= 1 (got {payload.transport.carPassengers})"
        )
    if payload.transport.carAge > MAX_CAR_AGE:
        problems.append(
            f"transport.carAge must be <= {MAX_CAR_AGE} (got {payload.transport.carAge})"
        )
    if payload.energy.occupants < 1:
        problems.append(f"energy.occupants must be >= 1 (got {payload.energy.occupants})")

    meat_frequency = payload.lifestyle.meatFrequency
    if meat_frequency is not None and meat_frequency not in MEAT_FREQUENCIES:
        problems.append(f"lifestyle.meatFrequency must be between 1 and 4 (got {meat_frequency})")

    for path, fields in PERCENTAGE_FIELDS.items():
        section = _section(payload, path)
        for name in fields:
            value = getattr(section, name)
            if value is not None and not 0 <= value <= 100:
                problems.append(f"{path}.{name} must be between 0 and 100 (got {value})")

    return problems


def ensure_valid_input(payload: FootprintInput) -> None:
    problems = find_out_of_range(payload)
    if problems:
        logger.warning("Rejected footprint input: %s", "; ".join(problems))
        raise HTTPException(status_code=422, detail=problems)
