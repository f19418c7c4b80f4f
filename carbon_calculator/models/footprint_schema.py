from typing import Dict

from pydantic import BaseModel, Field

from ..schemas import CarbonFootprintResult, RecommendationSet


class FootprintReport(BaseModel):
    result: CarbonFootprintResult
    recommendations: RecommendationSet


class FactorTablesResponse(BaseModel):
    version: str = Field(..., description="Emission factor set version")
    car: Dict[str, float] = Field(..., description="kg CO2e per km by car type")
    publicTransport: Dict[str, float] = Field(..., description="kg CO2e per km by mode")
    flights: Dict[str, float] = Field(..., description="kg CO2e per flight by haul")
    electricity: float = Field(..., description="tCO2e per MWh of grid electricity")
    energyConversion: Dict[str, float] = Field(..., description="kWh per native heating unit")
    heating: Dict[str, float] = Field(..., description="tCO2e per MWh of heat by fuel")
    insulation: Dict[str, float] = Field(..., description="Multiplier on home energy emissions")
    diet: Dict[str, float] = Field(..., description="kg CO2e per year by diet")
    shopping: Dict[str, float] = Field(..., description="Weight per shopping score point")
    nationalAverage: float
    worldAverage: float
