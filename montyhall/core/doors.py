"""Doors, prize placement and the host's reveal."""
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

DEFAULT_DOOR_COUNT = 3


@dataclass(frozen=True)
class Door:
    """A single door. Prize placement never changes once created."""
    id: int
    has_prize: bool = False

    @property
    def label(self) -> str:
        return f"Door {self.id + 1}"

    def __str__(self) -> str:
        return self.label


DoorSet = Tuple[Door, ...]


def generate_doors(door_count: int = DEFAULT_DOOR_COUNT,
                   rng: Optional[random.Random] = None) -> DoorSet:
    """Create a fresh set of doors with one prize placed uniformly at random."""
    if door_count < 2:
        raise ValueError(f"Need at least 2 doors, got {door_count}")
    rng = rng or random
    prize_index = rng.randrange(door_count)
    return tuple(Door(index, index == prize_index) for index in range(door_count))


def prize_door(doors: Sequence[Door]) -> Door:
    """Return the door hiding the prize."""
    return next(door for door in doors if door.has_prize)


def choose_host_door(doors: Sequence[Door], selected_door_id: int,
                     rng: Optional[random.Random] = None) -> int:
    """Pick the door the host opens: never the player's, never the prize.

    When several doors qualify (the player picked the prize, or there are more
    than three doors) the host picks uniformly among them.
    """
    options = [door.id for door in doors
               if door.id != selected_door_id and not door.has_prize]
    if not options:
        raise RuntimeError(
            f"No door left for the host to open (selected {selected_door_id} "
            f"of {len(doors)} doors)"
        )
    rng = rng or random
    return options[rng.randrange(len(options))]


def resolve_switch(doors: Sequence[Door], selected_door_id: int, host_door_id: int) -> int:
    """Return the door a switching player moves to.

    With three doors this is the single remaining closed door. With more doors
    the lowest remaining id is taken. If nothing qualifies the selection is
    kept.
    """
    for door in doors:
        if door.id != selected_door_id and door.id != host_door_id:
            return door.id
    return selected_door_id


def resolve_outcome(doors: Sequence[Door], final_door_id: int) -> bool:
    """True if the final door hides the prize."""
    return any(door.id == final_door_id and door.has_prize for door in doors)
