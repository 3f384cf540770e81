"""
Sieve stack: the ordered set of screens used in one grain-size analysis.

Screens are kept sorted by descending aperture and the stack always ends in
exactly one pan. The pan is synthesized here; callers never supply it.

Usage:
    stack = SieveStack([20, 10, 0.08], units="metric", sample={"dry_mass": 2000})
    stack.retain(20, 150)
    stack.compute_passing()
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

from .config import settings
from .exceptions import (
    DuplicateSizeError,
    EmptyStackError,
    MissingSampleDataError,
    NotFoundError,
    ProtectedEntryError,
)
from .models import PAN
from .schemas import SampleData, SieveTestParams
from .sieve import Sieve, coerce_units, is_number

logger = logging.getLogger(__name__)


class SieveStack:
    """
    Screens sorted by descending size, closed by a pan, plus the sample
    they were used on.

    The backing list is private. Inspect it through `entries`, `sizes`,
    iteration and `len()`; change it only through add/remove/retain.
    """

    def __init__(self, sizes=None, units=None, sample=None):
        self._units = coerce_units(units)
        self.sample = sample

        sieves = []
        for item in sizes or []:
            # Skip non-numeric tokens, including any "Pan" markers
            if not is_number(item):
                logger.debug("Dropping non-numeric sieve size %r", item)
                continue
            if any(s.matches(item) for s in sieves):
                logger.debug("Dropping duplicate sieve size %r", item)
                continue
            sieves.append(Sieve(item, self._units))

        sieves.sort(key=Sieve.sort_key, reverse=True)
        sieves.append(Sieve(PAN, self._units))
        self._entries = sieves

    @classmethod
    def from_params(cls, params: dict) -> "SieveStack":
        """Build a stack from a {sizes, units, sample} mapping."""
        parsed = SieveTestParams.model_validate(params)
        return cls(parsed.sizes, units=parsed.units, sample=parsed.sample)

    @classmethod
    def from_dict(cls, data: dict) -> "SieveStack":
        """Rebuild a stack saved with to_dict(), masses included."""
        sieves = data.get("sieves", [])
        stack = cls(
            [s["size"] for s in sieves],
            units=data.get("units"),
            sample=data.get("sample"),
        )
        for s in sieves:
            stack.retain(s["size"], s.get("mass", 0.0))
        return stack

    # --- Read-only views ---

    @property
    def units(self):
        return self._units

    @property
    def sample(self) -> SampleData:
        return self._sample

    @sample.setter
    def sample(self, value):
        if value is None:
            value = SampleData()
        elif not isinstance(value, SampleData):
            value = SampleData.model_validate(value)
        self._sample = value

    @property
    def entries(self) -> tuple:
        return tuple(self._entries)

    @property
    def sizes(self) -> list:
        return [s.size for s in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    # --- Lookup ---

    def index_of(self, size) -> int:
        """Position of the sieve of the given size, or -1 if it isn't in the stack."""
        if not self._entries:
            raise EmptyStackError(
                "There are no sieves in the stack. Build a new SieveStack instead"
            )
        for position, sieve in enumerate(self._entries):
            if sieve.matches(size):
                return position
        return -1

    def sieve_at(self, size) -> Optional[Sieve]:
        for sieve in self._entries:
            if sieve.matches(size):
                return sieve
        return None

    # --- Mutation ---

    def add(self, size) -> None:
        """Insert a new, empty sieve of the given size at its sorted position."""
        new_sieve = Sieve(size, self._units)

        if self.index_of(size) != -1:
            raise DuplicateSizeError(f"Sieve with size {size} is already in the stack")

        position = next(
            i for i, sieve in enumerate(self._entries)
            if sieve.is_pan or new_sieve.size > sieve.size
        )
        self._entries.insert(position, new_sieve)
        logger.debug("Added %s sieve at position %d", size, position)

    def remove(self, size) -> None:
        if size == PAN:
            raise ProtectedEntryError("The pan can't be removed from the stack")
        position = self.index_of(size)
        if position == -1:
            raise NotFoundError(f"Sieve with size {size} not found")
        del self._entries[position]
        logger.debug("Removed %s sieve from position %d", size, position)

    def retain(self, size, mass) -> float:
        """Record the mass retained on the sieve of the given size. Returns the stored mass."""
        sieve = self.sieve_at(size)
        if sieve is None:
            raise NotFoundError(f"Sieve with size {size} not found")
        return sieve.retained(mass)

    # --- Results ---

    def total_retained(self) -> float:
        """Mass retained on every sieve, pan included."""
        return sum(s.mass for s in self._entries)

    def compute_passing(self) -> list:
        """
        Percent passing for each screen, top of the stack down.

        Walk the stack keeping a running total of mass retained so far. The
        mass passing a screen is the dry mass minus everything retained on it
        and above it. The pan adds to the running total but gets no row.

        Returns:
            [{"size": float, "mass": float, "percent_passing": str}, ...]
        """
        dry_mass = self._sample.dry_mass
        if not dry_mass or not self._entries:
            raise MissingSampleDataError(
                "compute_passing() requires a sample dry mass and at least one sieve"
            )

        result = []
        cumulative_mass = 0.0
        for sieve in self._entries:
            cumulative_mass += sieve.mass
            if sieve.is_pan:
                continue
            passing = dry_mass - cumulative_mass
            result.append({
                "size": sieve.size,
                "mass": sieve.mass,
                "percent_passing": format_percent(passing / dry_mass * 100),
            })
        return result

    def to_dict(self) -> dict:
        return {
            "units": self._units.value,
            "sample": self._sample.model_dump(),
            "sieves": [{"size": s.size, "mass": s.mass} for s in self._entries],
        }

    def __repr__(self):
        return f"SieveStack(sizes={self.sizes!r}, units={self._units.value!r})"


def format_percent(value: float, decimals: Optional[int] = None) -> str:
    """Fixed-point string, rounding halves away from zero on the value's shortest repr."""
    if decimals is None:
        decimals = settings.SIEVE_PASSING_DECIMALS
    quantum = Decimal(1).scaleb(-decimals)
    number = Decimal(str(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the requested decimals
        ctx.prec = max(28, number.adjusted() + decimals + 2)
        return str(number.quantize(quantum, rounding=ROUND_HALF_UP))
