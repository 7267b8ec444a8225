from typing import List, Literal, Optional, Union

from pydantic import Field, ValidationInfo, field_validator

from jnlpgen.model.base import JnlpModel
from jnlpgen.model.information import check_non_negative
from jnlpgen.model.resources import Property

BundleKind = Literal["component", "application", "applet", "installer"]


class ComponentDesc(JnlpModel):
    kind: Literal["component"] = "component"

    class Config:
        frozen = True


class ApplicationDesc(JnlpModel):
    kind: Literal["application"] = "application"

    main_class: Optional[str] = Field(
        default=None,
        description="Fully qualified name of the class holding main()",
    )

    arguments: List[str] = Field(
        default_factory=list,
        description="Command line arguments passed to main()",
    )

    def add_argument(self, text: str) -> str:
        self.arguments.append(text)
        return text

    class Config:
        validate_assignment = True
        extra = "forbid"


class AppletDesc(JnlpModel):
    kind: Literal["applet"] = "applet"

    main_class: Optional[str] = Field(
        default=None,
        description="Fully qualified name of the applet class",
    )
    name: Optional[str] = Field(default=None, description="Applet name")

    # 0 is treated like an unset dimension when the descriptor is written.
    width: Optional[int] = Field(default=None, description="Width in pixels")
    height: Optional[int] = Field(default=None, description="Height in pixels")

    documentbase: Optional[str] = Field(
        default=None,
        description="Document base URL of the applet",
    )

    params: List[Property] = Field(default_factory=list)

    @field_validator("width", "height")
    @classmethod
    def validate_dimensions(
        cls, value: Optional[int], info: ValidationInfo
    ) -> Optional[int]:
        return check_non_negative(value, info)

    def add_param(self, **fields) -> Property:
        param = Property(**fields)
        self.params.append(param)
        return param

    class Config:
        validate_assignment = True
        extra = "forbid"


class InstallerDesc(JnlpModel):
    kind: Literal["installer"] = "installer"

    main_class: Optional[str] = Field(
        default=None,
        description="Fully qualified name of the installer class",
    )

    class Config:
        validate_assignment = True
        extra = "forbid"


Descriptor = Union[ComponentDesc, ApplicationDesc, AppletDesc, InstallerDesc]
