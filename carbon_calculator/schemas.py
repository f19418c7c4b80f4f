from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class MotorcycleInput(FrozenModel):
    owns: bool = False
    type: Optional[str] = None
    km: Optional[float] = None


class TransportInput(FrozenModel):
    carType: Optional[str] = Field(default="none", description="none, electric, hybrid, petrol or diesel")
    carKm: float = Field(default=0, description="Annual distance driven (km)")
    carAge: float = Field(default=0, description="Vehicle age in years, effect capped at 15")
    carPassengers: float = Field(default=1, description="Average occupants sharing each trip")
    publicTransportType: Optional[str] = Field(default="", description="none, bus, train, tram or subway")
    publicTransportKm: float = Field(default=0, description="Annual public transport distance (km)")
    flightsShortHaul: float = Field(default=0, description="Flights under 1500 km per year")
    flightsMediumHaul: float = Field(default=0, description="Flights of 1500-3500 km per year")
    flightsLongHaul: float = Field(default=0, description="Flights over 3500 km per year")
    motorcycle: MotorcycleInput = Field(
        default_factory=MotorcycleInput,
        description="Accepted but not used in the calculation",
    )


class EnergyInput(FrozenModel):
    homeType: Optional[str] = Field(default="", description="apartment, house, studio or loft")
    homeSize: float = Field(default=0, description="Living area (m²), informational")
    occupants: float = Field(default=1, description="Household size, informational")
    electricityKwh: float = Field(default=0, description="Annual electricity use (kWh)")
    heatingType: Optional[str] = Field(default="", description="electric, gas, oil or heatPump")
    heatingConsumption: float = Field(
        default=0,
        description="Annual heating use in the fuel's unit: kWh (electric, heatPump), m³ (gas), L (oil)",
    )
    renewableEnergy: bool = False
    renewablePercentage: Optional[float] = Field(default=None, description="Renewable share of electricity (0-100)")
    insulation: Optional[str] = Field(default="medium", description="poor, medium, good or excellent")


class ShoppingHabits(FrozenModel):
    clothes: float = Field(default=50, description="Purchase intensity score (0-100)")
    electronics: float = Field(default=50, description="Purchase intensity score (0-100)")
    furniture: float = Field(default=50, description="Purchase intensity score (0-100)")


class LifestyleInput(FrozenModel):
    dietType: Optional[str] = Field(
        default="", description="vegan, vegetarian, pescatarian, flexitarian or omnivore"
    )
    meatFrequency: Optional[int] = Field(
        default=None,
        description="1 rarely, 2 occasionally, 3 regularly, 4 daily; informational",
    )
    localFoodPercentage: float = Field(default=0, description="Share of local and seasonal food (0-100)")
    wasteRecycling: bool = False
    wasteComposting: bool = False
    shoppingHabits: ShoppingHabits = Field(default_factory=ShoppingHabits)
    waterConsumption: float = Field(default=0, description="Daily water use (L), informational")


class FootprintInput(FrozenModel):
    transport: TransportInput = Field(default_factory=TransportInput)
    energy: EnergyInput = Field(default_factory=EnergyInput)
    lifestyle: LifestyleInput = Field(default_factory=LifestyleInput)


class Breakdown(FrozenModel):
    transport: float = Field(..., description="Transport emissions (tCO2e/yr)")
    energy: float = Field(..., description="Home energy emissions (tCO2e/yr)")
    lifestyle: float = Field(..., description="Diet, shopping and waste emissions (tCO2e/yr)")


class Comparison(FrozenModel):
    percentageFromNational: float = Field(..., description="Positive when above the national average")
    percentageFromWorld: float = Field(..., description="Positive when above the world average")
    nationalAverage: float
    worldAverage: float


class CarbonFootprintResult(FrozenModel):
    total: float = Field(..., description="Total emissions (tCO2e/yr)")
    breakdown: Breakdown
    comparison: Comparison


class ImpactLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


class RecommendationAction(FrozenModel):
    title: str
    impact: ImpactLevel
    description: str


class RecommendationCategory(FrozenModel):
    category: str = Field(..., description="Transport, Energy or Lifestyle")
    actions: Tuple[RecommendationAction, ...]


class RecommendationSet(FrozenModel):
    categories: Tuple[RecommendationCategory, ...] = ()
