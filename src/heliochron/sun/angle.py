from dataclasses import dataclass

from ..logging import get_logger
from ..space_time.civil import CivilLike
from ..space_time.trigonometry import arccos, arccot, cos, sin, tan
from .coordinates import SolarCoordinates

logger = get_logger(__name__)


class SolarEventError(Exception):
    """Raised when a solar event does not happen at a location on a date."""

    pass


class SunNeverRisesError(SolarEventError):
    """The Sun stays below the requested altitude all day (polar night)."""

    def __init__(self, message: str = "Sun never rises at this location on this date"):
        super().__init__(message)


class SunNeverSetsError(SolarEventError):
    """The Sun stays above the requested altitude all day (polar day)."""

    def __init__(self, message: str = "Sun never sets at this location on this date"):
        super().__init__(message)


@dataclass(frozen=True)
class SolarAngle:
    """Hour angles of the Sun for an observer at a given latitude."""

    coordinates: SolarCoordinates
    latitude: float

    @classmethod
    def on(cls, value: CivilLike, latitude: float) -> "SolarAngle":
        return cls(SolarCoordinates.on(value), latitude)

    def _cos_latitude(self) -> float:
        # dtr(±90) rounds to just past the pole, where cos turns negative
        return abs(cos(self.latitude))

    def hour_at(self, altitude: float) -> float:
        """Compute the hour angle at which the Sun crosses an altitude.

        At the poles every hour angle is degenerate, so only the error type
        is meaningful: polar day raises SunNeverSetsError and polar night
        raises SunNeverRisesError.

        Args:
            altitude: Sun altitude in degrees

        Returns:
            float: Hour angle in degrees

        Raises:
            SunNeverRisesError: If the Sun stays below altitude all day
            SunNeverSetsError: If the Sun stays above altitude all day
        """
        lat = self.latitude
        declination = self.coordinates.declination

        sin_h = (-sin(altitude) - sin(lat) * sin(declination)) / (
            self._cos_latitude() * cos(declination)
        )

        if sin_h > 1:
            logger.debug(f"cos(H) = {sin_h} at latitude {lat}: polar night")
            raise SunNeverRisesError()

        if sin_h < -1:
            logger.debug(f"cos(H) = {sin_h} at latitude {lat}: polar day")
            raise SunNeverSetsError()

        return arccos(sin_h)

    def at_shadow(self, ratio: float) -> float:
        """Compute the hour angle at which a shadow is ratio times the object height.

        Args:
            ratio: Shadow length divided by object height, added to the noon shadow

        Returns:
            float: Hour angle in degrees

        Raises:
            SolarEventError: If the shadow never has that length on this date.
                Ratios at or below zero fall here: rounding keeps the noon
                shadow itself just out of reach.
        """
        declination = self.coordinates.declination
        latitude = self.latitude

        cos_h = (
            sin(arccot(ratio + tan(latitude - declination)))
            - sin(latitude) * sin(declination)
        ) / (self._cos_latitude() * cos(declination))

        if not -1 <= cos_h <= 1:
            logger.debug(
                f"cos(H) = {cos_h} for shadow ratio {ratio} at latitude {latitude}"
            )
            raise SolarEventError(
                f"Shadow never reaches {ratio} times the object height on this date"
            )

        return arccos(cos_h)
