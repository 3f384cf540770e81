import enum


class UnitsSystem(str, enum.Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


# The pan sits under the finest screen and has no aperture size.
# Stored as a plain string so it round-trips through JSON and form input.
PAN = "Pan"


# Display units for sieve size and retained mass, per units system
SIZE_UNITS = {
    UnitsSystem.METRIC: "mm",
    UnitsSystem.IMPERIAL: "in",
}

MASS_UNITS = {
    UnitsSystem.METRIC: "g",
    UnitsSystem.IMPERIAL: "lb",
}
