"""Tests for calculator requests, results and state transitions."""

import math
from datetime import datetime, timedelta

import pytest

from datecalc import (
    CalculationRequest,
    CalculationResult,
    CalculatorState,
    Instant,
    Settings,
    calculate,
    default_request,
    is_form_valid,
)
from datecalc.calculator import (
    INVALID_DATE_MESSAGE,
    INVALID_QUANTITY_MESSAGE,
    MISSING_INPUT_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
)


def base() -> Instant:
    return Instant.from_datetime(datetime(2025, 1, 15, 10, 30))


def test_default_request():
    """Test the initial selections."""
    before = datetime.now()
    request = default_request()

    assert request.operator == "add"
    assert request.unit == "days"
    assert request.quantity is None
    assert request.base is not None
    assert request.base.to_datetime() - before < timedelta(seconds=5)


def test_default_request_uses_settings():
    """Test settings choose the initial unit and operator."""
    request = default_request(
        Settings(default_unit="hours", default_operator="subtract")
    )

    assert request.unit == "hours"
    assert request.operator == "subtract"


def test_form_initially_invalid():
    """Test the form is invalid until a quantity is entered."""
    assert is_form_valid(default_request()) is False


def test_form_valid_with_inputs():
    """Test the form is valid with a date and a quantity."""
    request = CalculationRequest(base=base(), quantity=5)

    assert is_form_valid(request) is True


def test_form_invalid_with_bad_date():
    """Test an invalid base date invalidates the form."""
    request = CalculationRequest(base=Instant.parse("invalid"), quantity=5)

    assert is_form_valid(request) is False


def test_idle_result():
    """Test an idle result has nothing to show."""
    idle = CalculationResult.idle(default_request())

    assert idle.state is CalculatorState.IDLE
    assert idle.result is None
    assert idle.error_message == ""
    assert idle.formatted == ""
    assert idle.description == ""


def test_calculate_computed():
    """Test a successful calculation."""
    outcome = calculate(
        CalculationRequest(base=base(), quantity=5, unit="days", operator="add")
    )

    assert outcome.state is CalculatorState.COMPUTED
    assert outcome.error_message == ""
    assert outcome.formatted == "2025-01-20"
    assert outcome.description == "Adding 5 days"


def test_calculate_hours_shows_time():
    """Test the formatted result follows the request's unit."""
    outcome = calculate(
        CalculationRequest(base=base(), quantity=3, unit="hours", operator="subtract")
    )

    assert outcome.formatted == "2025-01-15 07:30:00 AM"
    assert outcome.description == "Subtracting 3 hours"


def test_calculate_missing_inputs():
    """Test missing inputs produce an error."""
    outcome = calculate(CalculationRequest(base=base(), quantity=None))

    assert outcome.state is CalculatorState.ERRORED
    assert outcome.error_message == MISSING_INPUT_MESSAGE
    assert outcome.result is None
    assert outcome.description == ""


def test_calculate_missing_base():
    """Test a missing base date produces an error."""
    outcome = calculate(CalculationRequest(base=None, quantity=1))

    assert outcome.state is CalculatorState.ERRORED
    assert outcome.error_message == MISSING_INPUT_MESSAGE


def test_calculate_invalid_date():
    """Test an invalid base date produces an error and no result."""
    outcome = calculate(CalculationRequest(base=Instant.parse("invalid"), quantity=1))

    assert outcome.state is CalculatorState.ERRORED
    assert outcome.error_message == INVALID_DATE_MESSAGE
    assert outcome.result is None
    assert outcome.formatted == ""


def test_calculate_out_of_range():
    """Test an unrepresentable result produces an error."""
    far_future = Instant.from_datetime(datetime(9999, 12, 31))

    outcome = calculate(
        CalculationRequest(base=far_future, quantity=1, unit="weeks")
    )

    assert outcome.state is CalculatorState.ERRORED
    assert outcome.error_message == OUT_OF_RANGE_MESSAGE


def test_requests_are_independent():
    """Test two calculations sharing a base don't interfere."""
    shared = base()

    first = calculate(CalculationRequest(base=shared, quantity=1, unit="months"))
    second = calculate(CalculationRequest(base=shared, quantity=2, unit="months"))

    assert first.result.month == 2
    assert second.result.month == 3
    assert shared.month == 1


@pytest.mark.parametrize("quantity", [math.nan, math.inf, -math.inf, "5"])
def test_calculate_invalid_quantity(quantity):
    """Test an unusable quantity is reported as an input error."""
    outcome = calculate(CalculationRequest(base=base(), quantity=quantity))

    assert outcome.state is CalculatorState.ERRORED
    assert outcome.error_message == INVALID_QUANTITY_MESSAGE
    assert outcome.error_message != OUT_OF_RANGE_MESSAGE
    assert outcome.result is None


def test_form_invalid_with_bad_quantity():
    """Test a non-finite quantity invalidates the form."""
    assert is_form_valid(CalculationRequest(base=base(), quantity=math.nan)) is False
