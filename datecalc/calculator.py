"""Calculator state for front ends.

A front end owns the user's selections and hands them to ``calculate`` as an
immutable ``CalculationRequest``. The returned ``CalculationResult`` carries
everything needed for display, so no state lives in the engine between calls.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum

from datecalc.core import (
    calculate_date,
    format_date_time,
    is_valid_date,
    operation_description,
)
from datecalc.instant import Instant
from datecalc.settings import Settings
from datecalc.units import Operator, TimeUnit

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please enter a date and a quantity."
INVALID_DATE_MESSAGE = "Please enter a valid date."
INVALID_QUANTITY_MESSAGE = "Please enter a valid quantity."
OUT_OF_RANGE_MESSAGE = "The resulting date is out of range."


class CalculatorState(Enum):
    IDLE = "idle"
    COMPUTED = "computed"
    ERRORED = "errored"


@dataclass(frozen=True, kw_only=True)
class CalculationRequest:
    """The user's current selections."""

    base: Instant | None
    quantity: int | None
    unit: TimeUnit = "days"
    operator: Operator = "add"


def default_request(settings: Settings | None = None) -> CalculationRequest:
    """Initial selections: now as the base date and no quantity yet."""
    settings = settings or Settings()
    return CalculationRequest(
        base=Instant.now(),
        quantity=None,
        unit=settings.default_unit,
        operator=settings.default_operator,
    )


def is_form_valid(request: CalculationRequest) -> bool:
    """True once the request has a valid base date and a finite quantity."""
    if request.base is None or not is_valid_date(request.base):
        return False
    return _is_usable_quantity(request.quantity)


def _is_usable_quantity(quantity: object) -> bool:
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
        return False
    return math.isfinite(quantity)


@dataclass(frozen=True, kw_only=True)
class CalculationResult:
    """Outcome of a calculation.

    Attributes:
        request: The selections the outcome was computed from
        result: The computed instant, None if nothing was computed
        error_message: User-facing error text, empty on success
    """

    request: CalculationRequest
    result: Instant | None = None
    error_message: str = ""

    @classmethod
    def idle(cls, request: CalculationRequest) -> "CalculationResult":
        return cls(request=request)

    @property
    def state(self) -> CalculatorState:
        if self.error_message:
            return CalculatorState.ERRORED
        if self.result is None:
            return CalculatorState.IDLE
        return CalculatorState.COMPUTED

    @property
    def formatted(self) -> str:
        if self.result is None:
            return ""
        return format_date_time(self.result, self.request.unit)

    @property
    def description(self) -> str:
        return operation_description(
            self.request.quantity,
            self.request.unit,
            self.request.operator,
            result=self.result,
            base=self.request.base,
        )


def calculate(request: CalculationRequest) -> CalculationResult:
    """Validate ``request`` and run the calculation.

    Never raises; problems are reported through ``error_message``.
    """
    if request.base is None or request.quantity is None:
        return CalculationResult(
            request=request, error_message=MISSING_INPUT_MESSAGE
        )
    if not is_valid_date(request.base):
        logger.debug("Invalid base date in %s", request)
        return CalculationResult(
            request=request, error_message=INVALID_DATE_MESSAGE
        )
    if not _is_usable_quantity(request.quantity):
        logger.debug("Invalid quantity in %s", request)
        return CalculationResult(
            request=request, error_message=INVALID_QUANTITY_MESSAGE
        )

    result = calculate_date(
        request.base, request.quantity, request.unit, request.operator
    )
    if not result.is_valid:
        logger.debug("No representable result for %s", request)
        return CalculationResult(
            request=request, error_message=OUT_OF_RANGE_MESSAGE
        )

    return CalculationResult(request=request, result=result)
