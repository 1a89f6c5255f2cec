from .angle import SolarAngle, SolarEventError, SunNeverRisesError, SunNeverSetsError
from .coordinates import SolarCoordinates
from .times import ObserverPosition, SolarTimes, event_timestamp, horizon_altitude

__all__ = [
    "SolarAngle",
    "SolarEventError",
    "SunNeverRisesError",
    "SunNeverSetsError",
    "SolarCoordinates",
    "ObserverPosition",
    "SolarTimes",
    "event_timestamp",
    "horizon_altitude",
]
