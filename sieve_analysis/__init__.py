"""
Sieve (grain-size) analysis.

A stack of mesh screens sorted by descending aperture, always closed by a
pan, and the percent-passing table computed from the mass retained on each
screen against the oven-dried sample mass.
"""

from .exceptions import (
    SieveAnalysisError,
    ValidationError,
    DuplicateSizeError,
    EmptyStackError,
    NotFoundError,
    ProtectedEntryError,
    MissingSampleDataError,
)
from .models import PAN, UnitsSystem
from .schemas import SampleData, SieveTestParams
from .sieve import Sieve
from .stack import SieveStack
from .gradation import GradationCalculator

__all__ = [
    "SieveAnalysisError",
    "ValidationError",
    "DuplicateSizeError",
    "EmptyStackError",
    "NotFoundError",
    "ProtectedEntryError",
    "MissingSampleDataError",
    "PAN",
    "UnitsSystem",
    "SampleData",
    "SieveTestParams",
    "Sieve",
    "SieveStack",
    "GradationCalculator",
]
