"""Data models for the billing engine.

This package contains Pydantic models for all inputs:
- BaseDataModel: Base class with common configuration
- SideRates / RateInputs: Calculator inputs
- Facility / Interpreter / Job: Stored records used for rate resolution
"""

from staffing_billing.models.base import BaseDataModel
from staffing_billing.models.rates import RateInputs, SideRates
from staffing_billing.models.records import Facility, Interpreter, Job

__all__ = [
    "BaseDataModel",
    "RateInputs",
    "SideRates",
    "Facility",
    "Interpreter",
    "Job",
]
