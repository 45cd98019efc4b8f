"""Token metadata document models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Trait(BaseModel):
    """A single name/value attribute of the token."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    trait_type: str = Field(min_length=1, description="Trait name")
    value: str = Field(min_length=1, description="Trait value")


class TokenMetadata(BaseModel):
    """The JSON metadata document for one token."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(min_length=1, description="Token display name")
    description: str = Field(description="Token description")
    image: str = Field(description="SVG image as a data URI")
    attributes: list[Trait] = Field(default_factory=list, description="Token traits")

    @field_validator("image")
    @classmethod
    def image_is_svg_data_uri(cls, value: str) -> str:
        """Reject images that are not base64 SVG data URIs."""
        if not value.startswith("data:image/svg+xml;base64,"):
            raise ValueError("image must be a base64 SVG data URI")
        return value
