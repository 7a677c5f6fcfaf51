from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..errors.internal import ConfigError
from ..nick.pool import filter_nicks


class AltNickConfig(BaseModel):
    """Alternate-nick plugin configuration.

    Attributes:
        nicks: Ordered fallback nicknames. Entries that are not valid
            nicknames are dropped; at least one has to survive.
        recovery: Take the original nick back when its holder quits.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    nicks: list[str]
    recovery: bool = False

    @field_validator("nicks", mode="before")
    @classmethod
    def validate_nicks(cls, v: Any) -> list[str]:
        """Filter nicks through the nickname grammar, keeping order."""
        if not isinstance(v, list | tuple):
            raise ValueError("nicks must be a list")
        validated = filter_nicks(v)
        if not validated:
            raise ValueError("nicks did not contain any valid nickname")
        return validated

    @field_validator("recovery", mode="before")
    @classmethod
    def validate_recovery(cls, v: Any) -> bool:
        # Reject "yes"/1 and friends; a typo should not silently turn it on.
        if not isinstance(v, bool):
            raise ValueError("recovery must be a boolean")
        return v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AltNickConfig:
        """Create AltNickConfig from a dictionary.

        Raises:
            ConfigError: If ``nicks`` is missing or any field is invalid.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(
                "configuration must be a mapping", data={"type": type(data).__name__}
            )
        if "nicks" not in data:
            raise ConfigError("Missing required configuration key 'nicks'")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigError("; ".join(errors), data={"errors": errors}) from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()
