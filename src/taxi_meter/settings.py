from datetime import timedelta
from decimal import Decimal
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.exceptions import ConfigurationError
from .fare import FareConfig


class FareSettings(BaseSettings):
    initial_fare: int = Field(default=500, ge=0)
    initial_distance: Decimal = Field(default=Decimal("1.096"), ge=0, description="km")
    unit_fare: int = Field(default=100, ge=0)
    unit_distance: Decimal = Field(default=Decimal("0.237"), gt=0, description="km")
    time_threshold: float = Field(
        default=10.0,
        ge=0.0,
        description="Speed in km/h at or below which moves are billed by time",
    )
    time_unit_fare: int = Field(default=100, ge=0)
    time_unit_seconds: float = Field(default=90.0, ge=0.0)

    model_config = SettingsConfigDict(env_prefix="FARE_")

    def to_fare_config(self) -> FareConfig:
        """Build the meter tariff, raising ConfigurationError if it is unusable."""
        try:
            return FareConfig(
                initial_fare=self.initial_fare,
                initial_distance=self.initial_distance,
                unit_fare=self.unit_fare,
                unit_distance=self.unit_distance,
                time_threshold=self.time_threshold,
                time_unit_fare=self.time_unit_fare,
                time_unit=timedelta(seconds=self.time_unit_seconds),
            )
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid fare configuration",
                details={"errors": e.errors(include_url=False)},
            ) from e


class LoggingSettings(BaseSettings):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["text", "json"] = "text"
    environment: str = "development"

    model_config = SettingsConfigDict(env_prefix="LOG_")

    @property
    def json_output(self) -> bool:
        return self.format == "json"


class Settings(BaseSettings):
    fare: FareSettings = Field(default_factory=FareSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    """Load and validate settings from environment variables."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid settings in environment",
            details={"errors": e.errors(include_url=False)},
        ) from e
