import pytest

from carbon_calculator.schemas import (
    EnergyInput,
    FootprintInput,
    LifestyleInput,
    ShoppingHabits,
    TransportInput,
)


@pytest.fixture
def no_shopping() -> ShoppingHabits:
    return ShoppingHabits(clothes=0, electronics=0, furniture=0)


@pytest.fixture
def quiet_transport() -> TransportInput:
    return TransportInput(carType="none", publicTransportType="none")


@pytest.fixture
def quiet_energy() -> EnergyInput:
    return EnergyInput(heatingType="electric", insulation="medium")


@pytest.fixture
def quiet_lifestyle(no_shopping) -> LifestyleInput:
    return LifestyleInput(dietType="vegan", shoppingHabits=no_shopping)


@pytest.fixture
def neutral_input(quiet_transport, quiet_energy, quiet_lifestyle) -> FootprintInput:
    return FootprintInput(
        transport=quiet_transport,
        energy=quiet_energy,
        lifestyle=quiet_lifestyle,
    )


@pytest.fixture
def busy_input() -> FootprintInput:
    """Heavy user: triggers every recommendation rule."""
    return FootprintInput(
        transport=TransportInput(
            carType="petrol",
            carKm=20000,
            carAge=5,
            carPassengers=1,
            publicTransportType="bus",
            publicTransportKm=1000,
            flightsShortHaul=2,
            flightsMediumHaul=1,
            flightsLongHaul=1,
        ),
        energy=EnergyInput(
            homeType="house",
            homeSize=120,
            occupants=3,
            electricityKwh=6000,
            heatingType="oil",
            heatingConsumption=1500,
            renewableEnergy=False,
            insulation="poor",
        ),
        lifestyle=LifestyleInput(
            dietType="omnivore",
            meatFrequency=4,
            localFoodPercentage=10,
            wasteRecycling=False,
            wasteComposting=False,
            shoppingHabits=ShoppingHabits(clothes=80, electronics=80, furniture=60),
            waterConsumption=150,
        ),
    )
