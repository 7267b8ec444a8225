from typing import List, Literal, Optional

from pydantic import Field, ValidationInfo, field_validator

from jnlpgen.errors import ConfigError
from jnlpgen.model.base import JnlpModel

DescriptionKind = Literal["one-line", "short", "tooltip"]
IconKind = Literal["selected", "rollover", "disabled"]

UNSPECIFIED_KIND = "unspecified"


def check_non_negative(value: Optional[int], info: ValidationInfo) -> Optional[int]:
    if value is not None and value < 0:
        raise ConfigError(
            f"{info.field_name} must not be negative (got {value})"
        )
    return value


def drop_unspecified_kind(value):
    if value == UNSPECIFIED_KIND:
        return None
    return value


class Description(JnlpModel):
    kind: Optional[DescriptionKind] = Field(
        default=None,
        description="Description flavour; unset or unspecified means the general description",
    )

    text: str = Field(
        default="",
        description="Description text",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value):
        return drop_unspecified_kind(value)

    class Config:
        validate_assignment = True
        extra = "forbid"


class Icon(JnlpModel):
    href: Optional[str] = Field(
        default=None,
        description="URL of the icon image (required when written)",
    )

    kind: Optional[IconKind] = Field(
        default=None,
        description="Icon usage; unset or unspecified means the default icon",
    )

    width: Optional[int] = Field(default=None, description="Width in pixels")
    height: Optional[int] = Field(default=None, description="Height in pixels")
    depth: Optional[int] = Field(default=None, description="Color depth in bits")
    size: Optional[int] = Field(default=None, description="Image size in bytes")

    version: Optional[str] = Field(
        default=None,
        description="Version of the icon image",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value):
        return drop_unspecified_kind(value)

    @field_validator("width", "height", "depth", "size")
    @classmethod
    def validate_dimensions(
        cls, value: Optional[int], info: ValidationInfo
    ) -> Optional[int]:
        return check_non_negative(value, info)

    class Config:
        validate_assignment = True
        extra = "forbid"


class Information(JnlpModel):
    locale: Optional[str] = Field(
        default=None,
        description="Locale this information block applies to",
    )

    title: Optional[str] = Field(default=None, description="Bundle title")
    vendor: Optional[str] = Field(default=None, description="Bundle vendor")

    homepage: Optional[str] = Field(
        default=None,
        description="URL of the bundle's home page",
    )

    descriptions: List[Description] = Field(default_factory=list)
    icons: List[Icon] = Field(default_factory=list)

    offline: bool = Field(
        default=False,
        description="Whether the bundle may be launched while offline",
    )

    def add_description(self, **fields) -> Description:
        description = Description(**fields)
        self.descriptions.append(description)
        return description

    def add_icon(self, **fields) -> Icon:
        icon = Icon(**fields)
        self.icons.append(icon)
        return icon

    class Config:
        validate_assignment = True
        extra = "forbid"
