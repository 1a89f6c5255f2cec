"""Constants shared across the heliochron package."""

# Julian Date of the J2000.0 epoch (2000-01-01 12:00 TT)
J2000_JD = 2451545.0

# Offset between Julian Date and Modified Julian Date
MJD_OFFSET = 2400000.5

DAYS_PER_JULIAN_CENTURY = 36525.0

HOURS_PER_DAY = 24
MILLISECONDS_PER_DAY = 86_400_000

# 360 degrees of hour angle per 24 hours
DEGREES_PER_HOUR = 15.0

# Astronomical sunrise and sunset happen at altitude 0, but atmospheric
# refraction lifts the apparent disc, so the sun is seen slightly earlier
# and sets slightly later.
ZERO_ANGLE = 0.833

# Horizon dip per sqrt(metre) of observer elevation
HORIZON_DIP_PER_SQRT_METRE = 0.0347

# Correction added to the days-since-J2000 count before rounding up
DAYS_SINCE_J2000_EPSILON = 0.0008
