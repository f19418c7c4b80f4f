from ..schemas import (
    Breakdown,
    CarbonFootprintResult,
    Comparison,
    EnergyInput,
    FootprintInput,
    LifestyleInput,
    TransportInput,
)
from .factors import (
    CAR_AGE_CAP_YEARS,
    CAR_AGE_INCREMENT,
    CAR_FACTORS,
    COMPOSTING_MULTIPLIER,
    DIET_FACTORS,
    ELECTRICITY_FACTOR,
    ENERGY_CONVERSION_FACTORS,
    FLIGHT_FACTORS,
    HEATING_FACTORS,
    INSULATION_MULTIPLIERS,
    LOCAL_FOOD_REDUCTION_PER_PERCENT,
    NATIONAL_AVERAGE,
    PUBLIC_TRANSPORT_FACTORS,
    RECYCLING_MULTIPLIER,
    SHOPPING_SCALE,
    SHOPPING_WEIGHTS,
    WORLD_AVERAGE,
    CarType,
    DietType,
    FlightClass,
    HeatingType,
    InsulationLevel,
    PublicTransportType,
)


def estimate_car_co2(transport: TransportInput) -> float:
    """Car emissions in kg, shared between passengers and aged up to +30%."""
    car_type = CarType.parse(transport.carType)
    if car_type is CarType.NONE:
        return 0.0

    age_multiplier = 1 + min(transport.carAge, CAR_AGE_CAP_YEARS) * CAR_AGE_INCREMENT
    passengers = max(transport.carPassengers, 1)
    return transport.carKm * CAR_FACTORS[car_type] * age_multiplier / passengers


def estimate_public_transport_co2(transport: TransportInput) -> float:
    """Public transport emissions in kg."""
    mode = PublicTransportType.parse(transport.publicTransportType)
    if mode is PublicTransportType.NONE:
        return 0.0
    return transport.publicTransportKm * PUBLIC_TRANSPORT_FACTORS[mode]


def estimate_flights_co2(transport: TransportInput) -> float:
    """Flight emissions in kg from per-trip averages."""
    return (
        transport.flightsShortHaul * FLIGHT_FACTORS[FlightClass.SHORT_HAUL]
        + transport.flightsMediumHaul * FLIGHT_FACTORS[FlightClass.MEDIUM_HAUL]
        + transport.flightsLongHaul * FLIGHT_FACTORS[FlightClass.LONG_HAUL]
    )


def calculate_transport_emissions(transport: TransportInput) -> float:
    """Annual transport emissions in tonnes CO2e."""
    kg = (
        estimate_car_co2(transport)
        + estimate_public_transport_co2(transport)
        + estimate_flights_co2(transport)
    )
    return kg / 1000


def estimate_electricity_co2(energy: EnergyInput) -> float:
    """Grid electricity emissions in tonnes, net of the renewable share."""
    emissions = (energy.electricityKwh / 1000) * ELECTRICITY_FACTOR
    if energy.renewableEnergy and energy.renewablePercentage:
        emissions *= 1 - energy.renewablePercentage / 100
    return emissions


def heating_kwh(energy: EnergyInput) -> float:
    """Heating consumption converted from the fuel's native unit to kWh."""
    fuel = HeatingType.parse(energy.heatingType)
    return energy.heatingConsumption * ENERGY_CONVERSION_FACTORS[fuel]


def estimate_heating_co2(energy: EnergyInput) -> float:
    """Heating emissions in tonnes."""
    fuel = HeatingType.parse(energy.heatingType)
    return (heating_kwh(energy) / 1000) * HEATING_FACTORS[fuel]


def calculate_energy_emissions(energy: EnergyInput) -> float:
    """Annual home energy emissions in tonnes CO2e, corrected for insulation."""
    insulation = InsulationLevel.parse(energy.insulation)
    subtotal = estimate_electricity_co2(energy) + estimate_heating_co2(energy)
    return subtotal * INSULATION_MULTIPLIERS[insulation]


def estimate_diet_co2(lifestyle: LifestyleInput) -> float:
    """Diet emissions in tonnes after the local food adjustment.

    The adjustment is linear and not clamped: 100% local food removes 20% of
    the baseline, and percentages outside 0-100 over- or under-adjust.
    """
    diet = DietType.parse(lifestyle.dietType)
    local_food_adjustment = 1 - lifestyle.localFoodPercentage * LOCAL_FOOD_REDUCTION_PER_PERCENT
    return DIET_FACTORS[diet] * local_food_adjustment / 1000


def estimate_shopping_co2(lifestyle: LifestyleInput) -> float:
    """Shopping emissions in tonnes from the three intensity scores."""
    habits = lifestyle.shoppingHabits
    weighted = (
        habits.clothes * SHOPPING_WEIGHTS["clothes"]
        + habits.electronics * SHOPPING_WEIGHTS["electronics"]
        + habits.furniture * SHOPPING_WEIGHTS["furniture"]
    )
    return weighted * SHOPPING_SCALE


def calculate_lifestyle_emissions(lifestyle: LifestyleInput) -> float:
    """Annual lifestyle emissions in tonnes CO2e."""
    emissions = estimate_diet_co2(lifestyle) + estimate_shopping_co2(lifestyle)

    # waste reductions apply to diet and shopping together
    if lifestyle.wasteRecycling:
        emissions *= RECYCLING_MULTIPLIER
    if lifestyle.wasteComposting:
        emissions *= COMPOSTING_MULTIPLIER

    return emissions


def compare_to_averages(total: float) -> Comparison:
    return Comparison(
        percentageFromNational=(total - NATIONAL_AVERAGE) / NATIONAL_AVERAGE * 100,
        percentageFromWorld=(total - WORLD_AVERAGE) / WORLD_AVERAGE * 100,
        nationalAverage=NATIONAL_AVERAGE,
        worldAverage=WORLD_AVERAGE,
    )


def calculate_footprint(payload: FootprintInput) -> CarbonFootprintResult:
    transport = calculate_transport_emissions(payload.transport)
    energy = calculate_energy_emissions(payload.energy)
    lifestyle = calculate_lifestyle_emissions(payload.lifestyle)
    total = transport + energy + lifestyle

    return CarbonFootprintResult(
        total=total,
        breakdown=Breakdown(transport=transport, energy=energy, lifestyle=lifestyle),
        comparison=compare_to_averages(total),
    )
