"""Trip lifecycle status and its transition table."""

from enum import Enum


class TripStatus(str, Enum):
    PLANNED = "PLANNED"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"


# No lifecycle is imposed: every status may move to every status.
ALLOWED_TRANSITIONS: dict[TripStatus, frozenset[TripStatus]] = {
    TripStatus.PLANNED: frozenset(TripStatus),
    TripStatus.ONGOING: frozenset(TripStatus),
    TripStatus.COMPLETED: frozenset(TripStatus),
}

# Statuses that still accept new bookings.
BOOKABLE_STATUSES: frozenset[TripStatus] = frozenset({TripStatus.PLANNED, TripStatus.ONGOING})


def can_transition(current: TripStatus, target: TripStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())
