"""Calculator defaults, optionally read from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from datecalc.units import OPERATORS, TIME_UNITS, Operator, TimeUnit

UNIT_ENV_VAR = "DATECALC_DEFAULT_UNIT"
OPERATOR_ENV_VAR = "DATECALC_DEFAULT_OPERATOR"


@dataclass(frozen=True, kw_only=True)
class Settings:
    """Initial selections offered to a calculator front end.

    Attributes:
        default_unit: Unit selected before the user picks one
        default_operator: Operator selected before the user picks one
    """

    default_unit: TimeUnit = "days"
    default_operator: Operator = "add"

    def __post_init__(self) -> None:
        if self.default_unit not in TIME_UNITS:
            valid = ", ".join(TIME_UNITS)
            raise ValueError(
                f"Invalid default unit: '{self.default_unit}'\n"
                f"Valid units: {valid}\n"
            )
        if self.default_operator not in OPERATORS:
            valid = ", ".join(OPERATORS)
            raise ValueError(
                f"Invalid default operator: '{self.default_operator}'\n"
                f"Valid operators: {valid}\n"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``DATECALC_DEFAULT_*`` variables.

        Unset or blank variables fall back to the built-in defaults.

        Raises:
            ValueError: If a variable names an unknown unit or operator
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}

        unit = env.get(UNIT_ENV_VAR, "").strip().lower()
        if unit:
            overrides["default_unit"] = unit
        operator = env.get(OPERATOR_ENV_VAR, "").strip().lower()
        if operator:
            overrides["default_operator"] = operator

        return cls(**overrides)  # type: ignore[arg-type]
