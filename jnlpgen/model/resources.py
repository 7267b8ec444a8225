from typing import List, Literal, Optional

from pydantic import Field, ValidationInfo, field_validator

from jnlpgen.model.base import JnlpModel
from jnlpgen.model.information import check_non_negative

Download = Literal["eager", "lazy"]


class Property(JnlpModel):
    """A ``name``/``value`` pair, written as ``property`` or applet ``param``."""

    name: Optional[str] = Field(default=None, description="Property name")
    value: Optional[str] = Field(default=None, description="Property value")

    class Config:
        validate_assignment = True
        extra = "forbid"


class Package(JnlpModel):
    name: Optional[str] = Field(
        default=None,
        description="Package name, optionally ending in .*",
    )

    part: Optional[str] = Field(
        default=None,
        description="Part that contains the package",
    )

    recursive: bool = Field(
        default=False,
        description="Whether sub-packages belong to the same part",
    )

    class Config:
        validate_assignment = True
        extra = "forbid"


class Jar(JnlpModel):
    href: Optional[str] = Field(default=None, description="URL of the jar file")
    version: Optional[str] = Field(default=None, description="Requested version")

    main: bool = Field(
        default=False,
        description="Whether this jar holds the main class",
    )

    download: Download = Field(default="eager", description="Download policy")
    size: Optional[int] = Field(default=None, description="Download size in bytes")
    part: Optional[str] = Field(default=None, description="Part the jar belongs to")

    @field_validator("size")
    @classmethod
    def validate_size(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        return check_non_negative(value, info)

    class Config:
        validate_assignment = True
        extra = "forbid"


class NativeLib(JnlpModel):
    href: Optional[str] = Field(
        default=None,
        description="URL of the jar holding native libraries",
    )
    version: Optional[str] = Field(default=None, description="Requested version")
    download: Download = Field(default="eager", description="Download policy")
    size: Optional[int] = Field(default=None, description="Download size in bytes")
    part: Optional[str] = Field(default=None, description="Part the library belongs to")

    @field_validator("size")
    @classmethod
    def validate_size(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        return check_non_negative(value, info)

    class Config:
        validate_assignment = True
        extra = "forbid"


class ExtDownload(JnlpModel):
    ext_part: Optional[str] = Field(
        default=None,
        description="Part of the extension to download",
    )
    part: Optional[str] = Field(
        default=None,
        description="Part of this bundle the download is tied to",
    )
    download: Download = Field(default="eager", description="Download policy")

    class Config:
        validate_assignment = True
        extra = "forbid"


class Extension(JnlpModel):
    href: Optional[str] = Field(
        default=None,
        description="URL of the extension's JNLP file",
    )
    version: Optional[str] = Field(default=None, description="Requested version")
    downloads: List[ExtDownload] = Field(default_factory=list)

    def add_download(self, **fields) -> ExtDownload:
        download = ExtDownload(**fields)
        self.downloads.append(download)
        return download

    class Config:
        validate_assignment = True
        extra = "forbid"


class J2se(JnlpModel):
    version: Optional[str] = Field(
        default=None,
        description="Java platform version(s) the bundle runs on",
    )
    href: Optional[str] = Field(
        default=None,
        description="URL identifying the JRE vendor",
    )
    initial_heap: Optional[int] = Field(
        default=None,
        description="Initial heap size in bytes",
    )
    max_heap: Optional[int] = Field(
        default=None,
        description="Maximum heap size in bytes",
    )
    resources: List["Resources"] = Field(
        default_factory=list,
        description="Resources only used with this JRE",
    )

    @field_validator("initial_heap", "max_heap")
    @classmethod
    def validate_heap(cls, value: Optional[int], info: ValidationInfo) -> Optional[int]:
        return check_non_negative(value, info)

    def add_resources(self, **fields) -> "Resources":
        resources = Resources(**fields)
        self.resources.append(resources)
        return resources

    class Config:
        validate_assignment = True
        extra = "forbid"


class Resources(JnlpModel):
    os: Optional[str] = Field(default=None, description="Operating system filter")
    arch: Optional[str] = Field(default=None, description="Architecture filter")
    locale: Optional[str] = Field(default=None, description="Locale filter")

    j2ses: List[J2se] = Field(default_factory=list)
    jars: List[Jar] = Field(default_factory=list)
    native_libs: List[NativeLib] = Field(default_factory=list)
    extensions: List[Extension] = Field(default_factory=list)
    properties: List[Property] = Field(default_factory=list)
    packages: List[Package] = Field(default_factory=list)

    def add_j2se(self, **fields) -> J2se:
        j2se = J2se(**fields)
        self.j2ses.append(j2se)
        return j2se

    def add_jar(self, **fields) -> Jar:
        jar = Jar(**fields)
        self.jars.append(jar)
        return jar

    def add_native_lib(self, **fields) -> NativeLib:
        native_lib = NativeLib(**fields)
        self.native_libs.append(native_lib)
        return native_lib

    def add_extension(self, **fields) -> Extension:
        extension = Extension(**fields)
        self.extensions.append(extension)
        return extension

    def add_property(self, **fields) -> Property:
        prop = Property(**fields)
        self.properties.append(prop)
        return prop

    def add_package(self, **fields) -> Package:
        package = Package(**fields)
        self.packages.append(package)
        return package

    class Config:
        validate_assignment = True
        extra = "forbid"


J2se.model_rebuild()
