"""Heart rate zone calculations."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

DEFAULT_ZONE_BOUNDARIES: Tuple[float, ...] = (0.50, 0.60, 0.70, 0.80, 0.90)

ZONE_NAMES = {
    1: "Fat burn",
    2: "Aerobic",
    3: "Aerobic power",
    4: "Anaerobic",
    5: "Neuromuscular",
}


@dataclass(frozen=True)
class HeartRateZones:
    """Heart rate bounds (bpm) of the five training zones."""

    zone1: Tuple[float, float]
    zone2: Tuple[float, float]
    zone3: Tuple[float, float]
    zone4: Tuple[float, float]
    zone5: Tuple[float, float]

    def ranges(self) -> Tuple[Tuple[float, float], ...]:
        """Zone bounds in zone order."""
        return (self.zone1, self.zone2, self.zone3, self.zone4, self.zone5)

    def zone_for(self, heart_rate: float) -> Optional[int]:
        """Zone number (1-5) for a heart rate; None outside every zone."""
        for number, (low, high) in enumerate(self.ranges(), start=1):
            if low <= heart_rate <= high:
                return number
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            f"zone{number}": {
                "min": round(low, 1),
                "max": round(high, 1),
                "name": ZONE_NAMES[number],
            }
            for number, (low, high) in enumerate(self.ranges(), start=1)
        }


def estimate_max_hr_from_age(age: float) -> float:
    """Estimate maximum heart rate with the Tanaka formula: 208 - 0.7 * age."""
    return 208 - (0.7 * age)


def karvonen_zones(
    max_hr: float,
    resting_hr: float,
    boundaries: Sequence[float] = DEFAULT_ZONE_BOUNDARIES,
) -> Optional[HeartRateZones]:
    """
    Calculate zones using the Karvonen (heart rate reserve) method.

    Each zone starts at ``resting_hr + reserve * boundary`` and ends where
    the next begins; zone 5 ends at ``max_hr``.

    Args:
        max_hr: Maximum heart rate
        resting_hr: Resting heart rate
        boundaries: Lower bound of zones 1-5 as fractions of the reserve

    Returns:
        HeartRateZones, or None if the heart rates are missing or max_hr
        does not exceed resting_hr
    """
    if resting_hr <= 0 or max_hr <= resting_hr:
        return None

    reserve = max_hr - resting_hr
    lows = [resting_hr + reserve * b for b in boundaries]
    highs = lows[1:] + [max_hr]
    bounds = list(zip(lows, highs))

    return HeartRateZones(*bounds)


def heart_rate_zone(
    heart_rate: float,
    max_hr: float,
    resting_hr: float,
    boundaries: Sequence[float] = DEFAULT_ZONE_BOUNDARIES,
) -> Optional[int]:
    """
    Zone number (1-5) for a heart rate.

    A reading on a shared boundary belongs to the lower zone.

    Returns:
        Zone number, or None for an absent reading (0), a reading below
        zone 1 or above max_hr, or unusable max/resting heart rates
    """
    if heart_rate <= 0:
        return None
    zones = karvonen_zones(max_hr, resting_hr, boundaries)
    if zones is None:
        return None
    return zones.zone_for(heart_rate)
