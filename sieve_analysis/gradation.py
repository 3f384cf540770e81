"""
Gradation calculator: loose form fields in, gradation result dict out.

Input fields (values may arrive as strings from a form or spreadsheet):
    {
        "sizes": [20, "10", 0.08, ...],
        "units": "metric" | "imperial",
        "sample": {"dry_mass": "2000", "wet_mass": ..., "washed_mass": ...},
        "retained": {"20": "150", 10: 310.5, "Pan": 42, ...},
    }

Output: GradationResult dict
    {
        units: str,
        size_unit: str,
        mass_unit: str,
        dry_mass: float,
        total_retained: float,
        rows: [{size, mass, percent_passing}, ...],
        assumptions: [str, ...],
    }
"""

import logging

from .models import PAN
from .sieve import is_number
from .stack import SieveStack

logger = logging.getLogger(__name__)


class GradationCalculator:
    """Builds a SieveStack from form fields, applies retained masses, returns the passing table."""

    SAMPLE_FIELDS = ("dry_mass", "wet_mass", "washed_mass")

    def calculate(self, fields: dict) -> dict:
        assumptions = []

        sizes = []
        for raw in fields.get("sizes") or []:
            size = self.parse_size(raw)
            if size is None or size == PAN:
                assumptions.append(f"Ignored sieve size entry {raw!r}")
                continue
            if size in sizes:
                assumptions.append(f"Duplicate sieve size {raw!r} merged into one sieve")
                continue
            sizes.append(size)

        stack = SieveStack(
            sizes,
            units=fields.get("units") or None,
            sample=self.parse_sample(fields.get("sample") or {}),
        )

        for raw_size, raw_mass in (fields.get("retained") or {}).items():
            size = self.parse_size(raw_size)
            mass = self.parse_number(raw_mass, default=None)
            if size is None or stack.sieve_at(size) is None:
                assumptions.append(f"No sieve of size {raw_size!r} in the stack; retained mass ignored")
                continue
            if mass is None or mass < 0:
                assumptions.append(f"Retained mass {raw_mass!r} on {raw_size} sieve is not a valid mass")
                continue
            stack.retain(size, mass)

        rows = stack.compute_passing()
        pan = stack.sieve_at(PAN)
        if pan.mass == 0:
            assumptions.append("No mass recorded on the pan")

        logger.info("Computed %d passing rows for %s stack", len(rows), stack.units.value)
        return self.make_result(stack, rows, assumptions)

    # --- Helpers ---

    def parse_number(self, value, default=0.0):
        """Parse a numeric value from user input. Returns default if it can't be parsed."""
        if value is None:
            return default
        if is_number(value):
            return float(value)
        try:
            parsed = float(str(value).strip())
        except (ValueError, TypeError):
            return default
        return parsed if is_number(parsed) else default

    def parse_size(self, value):
        """A positive sieve size, PAN for any spelling of "pan", or None."""
        if isinstance(value, str) and value.strip().lower() == PAN.lower():
            return PAN
        size = self.parse_number(value, default=None)
        if size is None or size <= 0:
            return None
        return size

    def parse_sample(self, sample: dict) -> dict:
        """Keep the known sample fields that parse as numbers."""
        parsed = {}
        for key in self.SAMPLE_FIELDS:
            value = self.parse_number(sample.get(key), default=None)
            if value is not None:
                parsed[key] = value
        return parsed

    def make_result(self, stack: SieveStack, rows: list, assumptions: list) -> dict:
        pan = stack.sieve_at(PAN)
        return {
            "units": stack.units.value,
            "size_unit": pan.size_unit,
            "mass_unit": pan.mass_unit,
            "dry_mass": stack.sample.dry_mass,
            "total_retained": round(stack.total_retained(), 2),
            "rows": rows,
            "assumptions": assumptions,
        }
