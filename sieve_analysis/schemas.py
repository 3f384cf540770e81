from pydantic import BaseModel, Field
from typing import Optional, List, Any

from .models import UnitsSystem


class SampleData(BaseModel):
    """Masses recorded for the soil sample. Only dry_mass feeds percent passing."""
    dry_mass: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    wet_mass: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    washed_mass: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class SieveTestParams(BaseModel):
    # Non-numeric tokens are dropped by SieveStack, not rejected here
    sizes: List[Any] = []
    units: Optional[UnitsSystem] = None
    sample: Optional[SampleData] = None
