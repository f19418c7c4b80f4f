from typing import Any, Callable, NamedTuple, Sequence

from ..schemas import (
    EnergyInput,
    FootprintInput,
    ImpactLevel,
    LifestyleInput,
    RecommendationAction,
    RecommendationCategory,
    RecommendationSet,
    TransportInput,
)
from .factors import CarType, DietType, HeatingType, InsulationLevel

HIGH_CAR_KM = 15000
HIGH_ELECTRICITY_KWH = 5000
LOW_LOCAL_FOOD_PERCENTAGE = 30
HIGH_SHOPPING_SCORE = 70

# Predicates read raw input values, so unknown categories match no rule.


class Rule(NamedTuple):
    applies: Callable[[Any], bool]
    action: RecommendationAction


TRANSPORT_RULES: Sequence[Rule] = (
    Rule(
        lambda transport: transport.carKm > HIGH_CAR_KM,
        RecommendationAction(
            title="Drive less",
            impact=ImpactLevel.HIGH,
            description=(
                "Try car-sharing or public transport for regular trips. Cutting your car "
                "journeys by 20% could save up to 600 kg of CO2 a year."
            ),
        ),
    ),
    Rule(
        lambda transport: transport.flightsLongHaul > 0,
        RecommendationAction(
            title="Make the most of your flights",
            impact=ImpactLevel.MODERATE,
            description=(
                "One long-haul flight a year is reasonable. To go further, take the train "
                "where you can and combine distant trips."
            ),
        ),
    ),
    Rule(
        lambda transport: transport.carType in (CarType.PETROL, CarType.DIESEL),
        RecommendationAction(
            title="Consider a cleaner vehicle",
            impact=ImpactLevel.HIGH,
            description=(
                "Switching to a hybrid or electric vehicle could cut your transport "
                "emissions by 50 to 75%."
            ),
        ),
    ),
)

ENERGY_RULES: Sequence[Rule] = (
    Rule(
        lambda energy: energy.electricityKwh > HIGH_ELECTRICITY_KWH,
        RecommendationAction(
            title="Reduce your electricity use",
            impact=ImpactLevel.HIGH,
            description=(
                "Replace energy-hungry appliances with A+++ models, use LED bulbs and switch "
                "devices off instead of leaving them on standby. Potential saving: 20-30% "
                "of your consumption."
            ),
        ),
    ),
    Rule(
        lambda energy: not energy.renewableEnergy,
        RecommendationAction(
            title="Switch to renewable energy",
            impact=ImpactLevel.VERY_HIGH,
            description=(
                "Moving to a green energy supplier can reduce the footprint of your "
                "electricity by up to 75%."
            ),
        ),
    ),
    Rule(
        lambda energy: energy.insulation in (InsulationLevel.POOR, InsulationLevel.MEDIUM),
        RecommendationAction(
            title="Improve your home insulation",
            impact=ImpactLevel.HIGH,
            description=(
                "Good insulation can cut heating consumption by 30 to 50%. Start with the "
                "loft and the windows."
            ),
        ),
    ),
    Rule(
        lambda energy: energy.heatingType == HeatingType.OIL,
        RecommendationAction(
            title="Change your heating system",
            impact=ImpactLevel.VERY_HIGH,
            description=(
                "Replacing oil heating with a heat pump can reduce your heating emissions "
                "by more than 80%."
            ),
        ),
    ),
)

LIFESTYLE_RULES: Sequence[Rule] = (
    Rule(
        lambda lifestyle: lifestyle.dietType == DietType.OMNIVORE,
        RecommendationAction(
            title="Eat less meat",
            impact=ImpactLevel.HIGH,
            description=(
                "Going flexitarian by halving your meat consumption can lower the footprint "
                "of your diet by about 30%."
            ),
        ),
    ),
    Rule(
        lambda lifestyle: lifestyle.localFoodPercentage < LOW_LOCAL_FOOD_PERCENTAGE,
        RecommendationAction(
            title="Choose local and seasonal produce",
            impact=ImpactLevel.MODERATE,
            description=(
                "Eating local and seasonal food avoids emissions from transport and heated "
                "greenhouses. Aim for 50% local produce."
            ),
        ),
    ),
    Rule(
        lambda lifestyle: not lifestyle.wasteRecycling or not lifestyle.wasteComposting,
        RecommendationAction(
            title="Manage your waste better",
            impact=ImpactLevel.MODERATE,
            description=(
                "Recycling and composting can reduce waste-related emissions by 25%. Start "
                "by sorting your waste and composting organic scraps."
            ),
        ),
    ),
    Rule(
        lambda lifestyle: (
            lifestyle.shoppingHabits.clothes > HIGH_SHOPPING_SCORE
            or lifestyle.shoppingHabits.electronics > HIGH_SHOPPING_SCORE
        ),
        RecommendationAction(
            title="Shop more responsibly",
            impact=ImpactLevel.MODERATE,
            description=(
                "Buy second-hand, repair your devices and keep your clothes longer. Cut "
                "non-essential purchases by 30%."
            ),
        ),
    ),
)


def _matching_actions(record, rules: Sequence[Rule]) -> tuple[RecommendationAction, ...]:
    return tuple(rule.action for rule in rules if rule.applies(record))


def transport_actions(transport: TransportInput) -> tuple[RecommendationAction, ...]:
    return _matching_actions(transport, TRANSPORT_RULES)


def energy_actions(energy: EnergyInput) -> tuple[RecommendationAction, ...]:
    return _matching_actions(energy, ENERGY_RULES)


def lifestyle_actions(lifestyle: LifestyleInput) -> tuple[RecommendationAction, ...]:
    return _matching_actions(lifestyle, LIFESTYLE_RULES)


def build_recommendations(payload: FootprintInput) -> RecommendationSet:
    sections = (
        ("Transport", transport_actions(payload.transport)),
        ("Energy", energy_actions(payload.energy)),
        ("Lifestyle", lifestyle_actions(payload.lifestyle)),
    )
    return RecommendationSet(
        categories=tuple(
            RecommendationCategory(category=name, actions=actions)
            for name, actions in sections
            if actions
        )
    )
