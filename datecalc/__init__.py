from .calculator import (
    CalculationRequest,
    CalculationResult,
    CalculatorState,
    calculate,
    default_request,
    is_form_valid,
)
from .core import calculate_date, format_date_time, is_valid_date, operation_description
from .instant import Instant
from .settings import Settings
from .units import OPERATOR_CHOICES, UNIT_CHOICES, Operator, TimeUnit
from .util import DAY, HOUR, MINUTE, WEEK

__all__ = [
    "Instant",
    "TimeUnit",
    "Operator",
    "calculate_date",
    "format_date_time",
    "is_valid_date",
    "operation_description",
    "CalculationRequest",
    "CalculationResult",
    "CalculatorState",
    "calculate",
    "default_request",
    "is_form_valid",
    "Settings",
    "UNIT_CHOICES",
    "OPERATOR_CHOICES",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
