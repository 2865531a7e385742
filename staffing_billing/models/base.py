"""Base model for all data models in the billing engine.

This module provides a base Pydantic model with common configuration
and the Decimal coercion shared by rate and record models.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from staffing_billing.utils.numeric import to_decimal


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Validation on assignment
    - Arbitrary types support for decimals

    Example:
        >>> class Fee(BaseDataModel):
        ...     name: str
        ...     amount: Decimal
        >>> fee = Fee(name="parking", amount=Decimal("12.00"))
        >>> fee.model_dump()
        {'name': 'parking', 'amount': Decimal('12.00')}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # Unknown fields are rejected
        extra="forbid",
        frozen=False,
    )


def coerce_decimal(value: Any) -> Decimal:
    """Pydantic ``before`` hook: convert to a finite Decimal or fail."""
    return to_decimal(value)


def coerce_optional_decimal(value: Any) -> Optional[Decimal]:
    """Pydantic ``before`` hook: blank becomes None, otherwise a finite Decimal.

    Raises:
        NonNumericInputError: If a non-blank value is not a number
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return to_decimal(value)
