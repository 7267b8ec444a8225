from typing import Any

from pydantic import BaseModel, ValidationError

from jnlpgen.errors import ConfigError


class JnlpModel(BaseModel):
    """Base for document models.

    Field validation failures, on construction or assignment, surface as
    :class:`ConfigError` like every other configuration mistake.
    """

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigError(
                f"Invalid {type(self).__name__}: {exc}"
            ) from exc

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise ConfigError(
                f"Invalid {type(self).__name__}.{name}: {exc}"
            ) from exc
