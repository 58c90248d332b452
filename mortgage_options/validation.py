"""Validation of raw form input before it reaches the calculation engine.

The calculation functions trust their arguments. Everything that can be
wrong with user input is caught here and reported as a list of errors.
"""

import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from .config import MAX_TERM_MONTHS

logger = logging.getLogger(__name__)

Fee = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class MortgageInputs(BaseModel):
    """Loan terms as entered on the comparison form.

    Numeric strings are coerced ("4.5" -> 4.5); infinite and NaN values are
    rejected. Rates are annual percentages.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    current_balance: float = Field(0.0, ge=0)
    current_rate: float = Field(0.0, ge=0, lt=100)
    remaining_term: int = Field(..., ge=1, le=MAX_TERM_MONTHS)
    new_rate: float = Field(0.0, ge=0, lt=100)
    lump_sum: float = Field(0.0, ge=0)

    # Refinance term, defaults to the remaining term
    refinance_term: int | None = Field(None, ge=1, le=MAX_TERM_MONTHS)

    # Closing costs: itemized fees win over a flat amount, which wins over the default percentage
    closing_costs: float | None = Field(None, ge=0)
    closing_cost_breakdown: dict[str, Fee] | None = None

    @field_validator("lump_sum")
    @classmethod
    def lump_sum_within_balance(cls, value: float, info: ValidationInfo) -> float:
        balance = info.data.get("current_balance")
        if balance is not None and value > balance:
            raise ValueError("Lump sum cannot exceed the current balance")
        return value

    @property
    def effective_refinance_term(self) -> int:
        return self.refinance_term or self.remaining_term


@dataclass(frozen=True)
class InputError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    inputs: MortgageInputs | None = None
    errors: list[InputError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.inputs is not None and not self.errors


def _to_input_errors(exc: ValidationError) -> list[InputError]:
    errors = []
    for err in exc.errors():
        name = ".".join(str(part) for part in err["loc"]) or "__root__"
        errors.append(InputError(field=name, message=err["msg"]))
    return errors


def validate_inputs(raw: Mapping[str, Any]) -> ValidationResult:
    """Validate raw form values.

    Never raises for bad input; rejected fields come back in ``errors``.
    Unknown keys are ignored.
    """
    try:
        inputs = MortgageInputs.model_validate(dict(raw))
    except ValidationError as e:
        errors = _to_input_errors(e)
        logger.debug("Rejected mortgage inputs: %s", errors)
        return ValidationResult(errors=errors)

    return ValidationResult(inputs=inputs)
