from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from jnlpgen.bundle.loader import SUPPORTED_SUFFIXES
from jnlpgen.errors import ConfigError

MAX_INDENT = 16


class GeneratorConfig(BaseModel):
    description: Path = Field(
        ...,
        description="Bundle description file (TOML or JSON)",
        examples=["jnlp.toml"],
    )

    output: Optional[Path] = Field(
        default=None,
        description="JNLP file to write; overrides the description's output",
    )

    indent: int = Field(
        default=4,
        description="Spaces per nesting level in the generated file",
    )

    compact: bool = Field(
        default=False,
        description="Write the document without any indentation or newlines",
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: Path) -> Path:
        if not value.exists():
            raise ConfigError(f"Bundle description does not exist: {value}")
        if not value.is_file():
            raise ConfigError(f"Bundle description is not a file: {value}")
        if value.suffix not in SUPPORTED_SUFFIXES:
            raise ConfigError(
                "Bundle description must be a .toml or .json file"
            )
        return value

    @field_validator("output")
    @classmethod
    def validate_output(cls, value: Optional[Path]) -> Optional[Path]:
        if value is not None and value.is_dir():
            raise ConfigError(f"Output path is a directory: {value}")
        return value

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, value: int) -> int:
        if not 0 <= value <= MAX_INDENT:
            raise ConfigError(
                f"Indent must be between 0 and {MAX_INDENT} (got {value})"
            )
        return value

    def indent_string(self) -> Optional[str]:
        if self.compact:
            return None
        return " " * self.indent

    class Config:
        frozen = True
