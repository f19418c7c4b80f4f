# Unknown category values resolve to each enum's __default__ member.
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

FACTORS_VERSION = "2024.1"


class _CategoryEnum(str, Enum):
    """String enum that falls back to ``__default__`` for unknown values."""

    @classmethod
    def _missing_(cls, value: object) -> "_CategoryEnum":
        return cls[cls.__default__]  # type: ignore[attr-defined]

    @classmethod
    def parse(cls, value: Any) -> "_CategoryEnum":
        if isinstance(value, cls):
            return value
        return cls(value)


class CarType(_CategoryEnum):
    __default__ = "NONE"

    NONE = "none"
    ELECTRIC = "electric"
    HYBRID = "hybrid"
    PETROL = "petrol"
    DIESEL = "diesel"


class PublicTransportType(_CategoryEnum):
    __default__ = "NONE"

    NONE = "none"
    BUS = "bus"
    TRAIN = "train"
    TRAM = "tram"
    SUBWAY = "subway"


class FlightClass(_CategoryEnum):
    __default__ = "SHORT_HAUL"

    SHORT_HAUL = "shortHaul"
    MEDIUM_HAUL = "mediumHaul"
    LONG_HAUL = "longHaul"


class HeatingType(_CategoryEnum):
    __default__ = "ELECTRIC"

    ELECTRIC = "electric"
    GAS = "gas"
    OIL = "oil"
    HEAT_PUMP = "heatPump"


class InsulationLevel(_CategoryEnum):
    __default__ = "MEDIUM"

    POOR = "poor"
    MEDIUM = "medium"
    GOOD = "good"
    EXCELLENT = "excellent"


class DietType(_CategoryEnum):
    __default__ = "OMNIVORE"

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    PESCATARIAN = "pescatarian"
    FLEXITARIAN = "flexitarian"
    OMNIVORE = "omnivore"


# kg CO2e per km
CAR_FACTORS: Mapping[CarType, float] = MappingProxyType({
    CarType.NONE: 0.0,
    CarType.ELECTRIC: 0.024,
    CarType.HYBRID: 0.089,
    CarType.PETROL: 0.192,
    CarType.DIESEL: 0.171,
})

# kg CO2e per passenger-km
PUBLIC_TRANSPORT_FACTORS: Mapping[PublicTransportType, float] = MappingProxyType({
    PublicTransportType.NONE: 0.0,
    PublicTransportType.BUS: 0.089,
    PublicTransportType.TRAIN: 0.041,
    PublicTransportType.TRAM: 0.035,
    PublicTransportType.SUBWAY: 0.033,
})

# kg CO2e per flight: short < 1500 km, medium 1500-3500 km, long > 3500 km
FLIGHT_FACTORS: Mapping[FlightClass, float] = MappingProxyType({
    FlightClass.SHORT_HAUL: 180.0,
    FlightClass.MEDIUM_HAUL: 400.0,
    FlightClass.LONG_HAUL: 1800.0,
})

CAR_AGE_CAP_YEARS = 15
CAR_AGE_INCREMENT = 0.02

# tonnes CO2e per MWh of grid electricity
ELECTRICITY_FACTOR = 0.0571

# kWh per native unit (m3 of gas, litre of oil)
ENERGY_CONVERSION_FACTORS: Mapping[HeatingType, float] = MappingProxyType({
    HeatingType.GAS: 10.55,
    HeatingType.OIL: 10.0,
    HeatingType.ELECTRIC: 1.0,
    HeatingType.HEAT_PUMP: 1.0,
})

# tonnes CO2e per MWh of heat
HEATING_FACTORS: Mapping[HeatingType, float] = MappingProxyType({
    HeatingType.GAS: 0.205,
    HeatingType.OIL: 0.324,
    HeatingType.ELECTRIC: ELECTRICITY_FACTOR,
    HeatingType.HEAT_PUMP: 0.019,
})

INSULATION_MULTIPLIERS: Mapping[InsulationLevel, float] = MappingProxyType({
    InsulationLevel.POOR: 1.3,
    InsulationLevel.MEDIUM: 1.0,
    InsulationLevel.GOOD: 0.8,
    InsulationLevel.EXCELLENT: 0.6,
})

# kg CO2e per year
DIET_FACTORS: Mapping[DietType, float] = MappingProxyType({
    DietType.VEGAN: 1000.0,
    DietType.VEGETARIAN: 1500.0,
    DietType.PESCATARIAN: 1700.0,
    DietType.FLEXITARIAN: 2000.0,
    DietType.OMNIVORE: 2500.0,
})

LOCAL_FOOD_REDUCTION_PER_PERCENT = 0.002

# tonnes CO2e per shopping score point, before the 0.01 scale
SHOPPING_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "clothes": 0.1,
    "electronics": 0.2,
    "furniture": 0.15,
})
SHOPPING_SCALE = 0.01

RECYCLING_MULTIPLIER = 0.9
COMPOSTING_MULTIPLIER = 0.95

# tonnes CO2e per person per year
NATIONAL_AVERAGE = 9.0
WORLD_AVERAGE = 4.7


def _by_value(table: Mapping[Any, float]) -> dict[str, float]:
    return {getattr(key, "value", key): value for key, value in table.items()}


def factor_tables() -> dict[str, Any]:
    """Plain-dict snapshot of every table, keyed by wire values."""
    return {
        "version": FACTORS_VERSION,
        "car": _by_value(CAR_FACTORS),
        "publicTransport": _by_value(PUBLIC_TRANSPORT_FACTORS),
        "flights": _by_value(FLIGHT_FACTORS),
        "electricity": ELECTRICITY_FACTOR,
        "energyConversion": _by_value(ENERGY_CONVERSION_FACTORS),
        "heating": _by_value(HEATING_FACTORS),
        "insulation": _by_value(INSULATION_MULTIPLIERS),
        "diet": _by_value(DIET_FACTORS),
        "shopping": _by_value(SHOPPING_WEIGHTS),
        "nationalAverage": NATIONAL_AVERAGE,
        "worldAverage": WORLD_AVERAGE,
    }
