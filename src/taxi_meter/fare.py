from datetime import timedelta
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class FareConfig(BaseModel):
    """Tariff supplied once when a meter is created.

    Distances are decimals so that a distance landing exactly on a unit
    boundary is floored to that unit.
    """

    initial_fare: int = Field(default=500, ge=0)
    initial_distance: Decimal = Field(
        default=Decimal("1.096"), ge=0, description="km covered by the initial fare"
    )
    unit_fare: int = Field(default=100, ge=0)
    unit_distance: Decimal = Field(default=Decimal("0.237"), gt=0, description="km per distance unit")
    time_threshold: float = Field(
        default=10.0,
        ge=0,
        description="Speed (km/h) at or below which time-rate pricing applies",
    )
    time_unit_fare: int = Field(default=100, ge=0)
    time_unit: timedelta = Field(default=timedelta(seconds=90), gt=timedelta(0))

    model_config = ConfigDict(frozen=True)


class FareCalculation(BaseModel):
    """Outcome of a single distance-rate or time-rate calculation."""

    amount: int = Field(ge=0)
    units: int = Field(ge=0)
    reason: str


class FareCalculator:
    """Applies the tiered distance/time tariff to trip segments."""

    def __init__(self, config: FareConfig) -> None:
        self.config = config

    def distance_fare(self, previous_distance: Decimal, segment_distance: Decimal) -> FareCalculation:
        """
        Charge the distance units newly crossed by a segment.

        `previous_distance` is the cumulative distance before the segment.
        Units crossed before the segment were billed by earlier segments
        and are not charged again.
        """
        if previous_distance < 0 or segment_distance < 0:
            raise ValueError("Distance must be non-negative")

        total_distance = previous_distance + segment_distance
        units = self._distance_units(total_distance)
        previous_units = self._distance_units(previous_distance)

        if total_distance <= self.config.initial_distance:
            return FareCalculation(amount=0, units=0, reason="within initial distance")

        additional_units = units - previous_units
        if additional_units <= 0:
            return FareCalculation(amount=0, units=0, reason="no new distance units")

        return FareCalculation(
            amount=additional_units * self.config.unit_fare,
            units=additional_units,
            reason=f"{additional_units} distance units",
        )

    def time_fare(self, duration: timedelta) -> FareCalculation:
        """Charge whole time units elapsed within a single segment."""
        if duration < timedelta(0):
            raise ValueError("Duration must be non-negative")

        units = duration // self.config.time_unit
        if units <= 0:
            return FareCalculation(amount=0, units=0, reason="below one time unit")

        return FareCalculation(
            amount=units * self.config.time_unit_fare,
            units=units,
            reason=f"{units} time units",
        )

    def _distance_units(self, distance: Decimal) -> int:
        chargeable = max(distance - self.config.initial_distance, Decimal(0))
        return int(chargeable // self.config.unit_distance)
