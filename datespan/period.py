from dataclasses import dataclass
from datetime import date
from typing import Generic

from datespan.compare import Point, is_after, is_between_inclusive
from datespan.predicates import intersects, is_contained


@dataclass(frozen=True, kw_only=True)
class Period(Generic[Point]):
    start: Point
    end: Point | None = None

    def __post_init__(self) -> None:
        if self.end is not None and is_after(self.start, self.end):
            raise ValueError(
                f"Period start ({self.start}) must be <= end ({self.end})"
            )

    @property
    def is_bounded(self) -> bool:
        return self.end is not None

    def contains(self, point: Point) -> bool:
        """True if `point` falls inside the period, bounds included."""
        return is_between_inclusive(point, self.start, self.end)

    def intersects(self, other: "Period[Point]") -> bool:
        return intersects(self.start, self.end, other.start, other.end)

    def within(self, other: "Period[Point]") -> bool:
        """True if this period lies entirely inside `other`."""
        return is_contained(self.start, self.end, other.start, other.end)

    def __str__(self) -> str:
        """Human-friendly string showing the range; an open end shows as ∞."""
        end = "∞" if self.end is None else self.end
        if type(self.start) is date and type(self.end) is date:
            days = (self.end - self.start).days + 1
            return f"Period({self.start}→{end}, {days}d)"
        return f"Period({self.start}→{end})"
