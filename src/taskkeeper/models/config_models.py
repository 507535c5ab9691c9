"""Configuration models for taskkeeper."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

OutputFormat = Literal["pretty", "table", "json", "yaml"]


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(default="pretty")
    color: bool = Field(default=True)
    icons: bool = Field(default=True)
    compact: bool = Field(default=False)


class DemoConfig(BaseModel):
    """Settings for the demo command."""

    seed_examples: bool = Field(
        default=True, description="Start the demo with the example tasks"
    )


class AppConfig(BaseModel):
    """Main taskkeeper configuration"""

    model_config = {"validate_assignment": True}

    output: OutputConfig = Field(default_factory=OutputConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
