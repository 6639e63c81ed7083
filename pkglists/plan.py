from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class InstallPlan:
    """Install targets split by the manager that owns them.

    No name in `secondary` appears in `primary`. `shadowed` lists the
    secondary entries dropped for that reason and is informational only.
    """

    primary: tuple[str, ...] = ()
    secondary: tuple[str, ...] = ()
    shadowed: tuple[str, ...] = field(default=(), compare=False)

    @property
    def is_empty(self) -> bool:
        return not self.primary and not self.secondary


def unique(packages: Iterable[str]) -> list[str]:
    """Stable de-dupe preserving first-seen order."""
    seen = set()
    result = []
    for p in packages:
        if p not in seen:
            seen.add(p)
            result.append(p)
    return result


def reconcile(primary: Iterable[str], secondary: Iterable[str]) -> InstallPlan:
    """Merge both lists into a plan. The primary list wins name collisions."""
    primary_targets = unique(primary)
    owned = set(primary_targets)

    secondary_targets = []
    shadowed = []
    for p in unique(secondary):
        if p in owned:
            shadowed.append(p)
        else:
            secondary_targets.append(p)

    return InstallPlan(
        primary=tuple(primary_targets),
        secondary=tuple(secondary_targets),
        shadowed=tuple(shadowed),
    )
