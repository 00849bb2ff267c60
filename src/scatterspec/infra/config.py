"""Environment-driven settings for spec assembly."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

VEGA_SCHEMA_URL = "https://vega.github.io/schema/vega/v5.json"


class ScatterSpecSettings(BaseSettings):
    """Settings for the XY spec builder."""

    model_config = SettingsConfigDict(
        env_prefix="SCATTERSPEC_",
        env_file=".env",
        extra="ignore",
    )

    schema_url: str = Field(VEGA_SCHEMA_URL, description="Value of the $schema key")
    description: str = Field(
        "XY scatter plot of dimensionality reduction coordinates",
        description="Value of the description key",
    )
    highlight_fill: str = Field("darkorange", description="Fill colour of selected points")
    strict: bool = Field(default=False, description="Validate parameters before assembling a spec")


def get_settings() -> ScatterSpecSettings:
    """Load settings from the environment."""
    return ScatterSpecSettings()
