"""
mansion.py
==========
Static room tree of the mansion and the room → clue lookup.

The tree is built once from a layout mapping (see case_data.MANSION_LAYOUT)
and never mutated afterwards. Which clue a room holds is a separate fixed
table, not a property of the tree.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional, Set, Tuple

from case_data import MANSION_LAYOUT, MANSION_ROOT, ROOM_CLUES
from models import Room

logger = logging.getLogger("mansion_mystery.mansion")

Layout = Mapping[str, Tuple[Optional[str], Optional[str]]]


def build_mansion(
    layout: Layout = MANSION_LAYOUT,
    root_name: str = MANSION_ROOT,
) -> Room:
    """
    Build the room tree rooted at `root_name`.

    Args:
        layout:    room name → (left child name | None, right child name | None).
        root_name: Name of the entrance room.

    Returns:
        The root Room.

    Raises:
        ValueError: if the root or a referenced child has no layout entry, or
                    a room is reachable through more than one parent.
    """
    if root_name not in layout:
        raise ValueError(f"Root room {root_name!r} is not in the layout.")

    seen: Set[str] = set()

    def _build(name: str) -> Room:
        if name in seen:
            raise ValueError(f"Room {name!r} appears more than once; layout is not a tree.")
        if name not in layout:
            raise ValueError(f"Room {name!r} is referenced but has no layout entry.")
        seen.add(name)
        left_name, right_name = layout[name]
        return Room(
            name=name,
            left=_build(left_name) if left_name else None,
            right=_build(right_name) if right_name else None,
        )

    root = _build(root_name)

    unreachable = set(layout) - seen
    if unreachable:
        logger.warning("Rooms not reachable from %s: %s", root_name, sorted(unreachable))
    logger.debug("Mansion built: %d rooms from root %s.", len(seen), root_name)
    return root


def clue_for_room(
    name: str,
    room_clues: Mapping[str, str] = ROOM_CLUES,
) -> Optional[str]:
    """Return the clue hidden in room `name`, or None if the room has none."""
    return room_clues.get(name)


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room in pre-order (node, left subtree, right subtree)."""
    stack = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def find_room(root: Optional[Room], name: str) -> Optional[Room]:
    """Return the room called `name`, or None."""
    for room in iter_rooms(root):
        if room.name == name:
            return room
    return None


def describe_exits(room: Room) -> Dict[str, Optional[str]]:
    """Map "left" / "right" to the neighbouring room names (None when walled off)."""
    return {
        "left":  room.left.name if room.left else None,
        "right": room.right.name if room.right else None,
    }
