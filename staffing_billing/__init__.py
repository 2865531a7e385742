"""Billing engine for an interpreter-staffing agency.

Splits job hours into business and after-hours buckets and computes the
facility charge and interpreter pay for a job.
"""

__version__ = "1.0.0"
