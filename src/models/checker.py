"""Checker Framework configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConfigurationSpec(BaseModel):
    """A named dependency configuration the plugin contributes to."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Configuration name")
    description: str | None = Field(
        default=None,
        description="Description set when the plugin creates the configuration",
    )


class DependencySpec(BaseModel):
    """One row of the dependency table: a configuration and its coordinate."""

    model_config = ConfigDict(frozen=True)

    configuration: ConfigurationSpec
    coordinate: str = Field(..., description="group:name:version notation")


class CheckerExtension(BaseModel):
    """User-facing ``checkerFramework { }`` extension."""

    model_config = ConfigDict(validate_assignment=True)

    checkers: list[str] = Field(
        default_factory=list,
        description="Fully qualified annotation processor class names to run",
    )

    @field_validator("checkers")
    @classmethod
    def validate_checkers(cls, v: list[str]) -> list[str]:
        """Strip whitespace and drop blank checker names."""
        return [c.strip() for c in v if c and c.strip()]
