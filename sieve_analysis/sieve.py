"""
A single screen in the stack, or the pan beneath it.

The size and units system are fixed when the sieve is built; only the
retained mass changes over the life of a test.
"""

import logging
import math
import numbers

from .config import settings
from .exceptions import ValidationError
from .models import PAN, UnitsSystem, SIZE_UNITS, MASS_UNITS

logger = logging.getLogger(__name__)


def is_number(value) -> bool:
    """True for finite real numbers. Booleans don't count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def coerce_units(units) -> UnitsSystem:
    """Resolve a units argument, falling back to the configured default when None."""
    if units is None:
        units = settings.SIEVE_DEFAULT_UNITS
    try:
        return UnitsSystem(units)
    except ValueError:
        raise ValidationError(
            f"Unknown units system: {units!r}. "
            f"Available: {[u.value for u in UnitsSystem]}"
        ) from None


class Sieve:
    """One screen (or the pan) and the soil mass retained on it."""

    def __init__(self, size, units=None):
        if not (size == PAN or (is_number(size) and size > 0)):
            raise ValidationError(
                f"Sieve size must be a positive number or {PAN!r}, got {size!r}"
            )
        self._size = size
        self._units = coerce_units(units)
        self._mass = 0.0

    @property
    def size(self):
        return self._size

    @property
    def units(self) -> UnitsSystem:
        return self._units

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def is_pan(self) -> bool:
        return self._size == PAN

    @property
    def size_unit(self) -> str:
        return SIZE_UNITS[self._units]

    @property
    def mass_unit(self) -> str:
        return MASS_UNITS[self._units]

    def retained(self, mass=None) -> float:
        """
        Return the mass retained on this sieve.

        If given a finite, non-negative number, it replaces the stored mass
        first (zero included). Anything else leaves the mass untouched.
        """
        if mass is not None:
            if is_number(mass) and mass >= 0:
                self._mass = mass
            else:
                logger.debug("Ignoring retained mass %r on %s sieve", mass, self._size)
        return self._mass

    def matches(self, size) -> bool:
        """Numeric equality for screens, exact match for the pan."""
        if size == PAN:
            return self.is_pan
        if not is_number(size) or self.is_pan:
            return False
        return self._size == size

    def sort_key(self) -> float:
        # Pan sorts below every numeric size
        return -math.inf if self.is_pan else self._size

    def __repr__(self):
        return f"Sieve(size={self._size!r}, mass={self._mass!r}, units={self._units.value!r})"
