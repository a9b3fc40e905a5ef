"""Magic rings: generation, wearing on either hand, and their combined effects."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

CANCEL_KEY = "\x1b"
_CANCEL_KEYS = frozenset({CANCEL_KEY, "\n", "\r"})


class RingKind(IntEnum):
    """The kinds of ring, in their traditional numbering."""

    STEALTH = 0
    R_TELEPORT = 1
    REGENERATION = 2
    SLOW_DIGEST = 3
    ADD_STRENGTH = 4
    SUSTAIN_STRENGTH = 5
    DEXTERITY = 6
    ADORNMENT = 7
    R_SEE_INVISIBLE = 8
    MAINTAIN_ARMOR = 9
    SEARCHING = 10


class Hand(Enum):
    """The hand a ring is worn on."""

    LEFT = "l"
    RIGHT = "r"


class RingError(Exception):
    """Raised when a ring cannot be put on or taken off."""


@dataclass
class Ring:
    """A ring; ``enchantment`` is only meaningful for strength and dexterity."""

    kind: RingKind
    enchantment: int = 0
    cursed: bool = False
    hand: Optional[Hand] = None

    @property
    def worn(self) -> bool:
        return self.hand is not None


@dataclass(frozen=True)
class RingStats:
    """The combined effect of the rings being worn."""

    stealthy: int = 0
    r_rings: int = 0
    e_rings: int = 0
    r_teleport: bool = False
    sustain_strength: bool = False
    add_strength: int = 0
    regeneration: int = 0
    ring_exp: int = 0
    r_see_invisible: bool = False
    maintain_armor: bool = False
    auto_search: int = 0


def generate_ring(kind: Optional[RingKind] = None, rng: Optional[random.Random] = None) -> Ring:
    """Create a new ring; a kind of ``None`` picks one at random."""
    rng = rng or random.Random()
    if kind is None:
        kind = RingKind(rng.randint(0, len(RingKind) - 1))
    else:
        kind = RingKind(kind)
    ring = Ring(kind=kind)
    if kind is RingKind.R_TELEPORT:
        ring.cursed = True
    elif kind in (RingKind.ADD_STRENGTH, RingKind.DEXTERITY):
        enchantment = 0
        while enchantment == 0:
            enchantment = rng.randint(0, 4) - 2
        ring.enchantment = enchantment
        ring.cursed = enchantment < 0
    elif kind is RingKind.ADORNMENT:
        ring.cursed = rng.randint(0, 1) == 1
    return ring


def compute_ring_stats(left: Optional[Ring], right: Optional[Ring]) -> RingStats:
    """Sum up the effects of the rings on the left and right hands."""
    stealthy = r_rings = e_rings = add_strength = 0
    regeneration = ring_exp = auto_search = 0
    r_teleport = sustain_strength = r_see_invisible = maintain_armor = False

    for ring in (left, right):
        if ring is None:
            continue
        r_rings += 1
        e_rings += 1
        kind = ring.kind
        if kind is RingKind.STEALTH:
            stealthy += 1
        elif kind is RingKind.R_TELEPORT:
            r_teleport = True
        elif kind is RingKind.REGENERATION:
            regeneration += 1
        elif kind is RingKind.SLOW_DIGEST:
            e_rings -= 2
        elif kind is RingKind.ADD_STRENGTH:
            add_strength += ring.enchantment
        elif kind is RingKind.SUSTAIN_STRENGTH:
            sustain_strength = True
        elif kind is RingKind.DEXTERITY:
            ring_exp += ring.enchantment
        elif kind is RingKind.R_SEE_INVISIBLE:
            r_see_invisible = True
        elif kind is RingKind.MAINTAIN_ARMOR:
            maintain_armor = True
        elif kind is RingKind.SEARCHING:
            auto_search += 2

    return RingStats(
        stealthy=stealthy,
        r_rings=r_rings,
        e_rings=e_rings,
        r_teleport=r_teleport,
        sustain_strength=sustain_strength,
        add_strength=add_strength,
        regeneration=regeneration,
        ring_exp=ring_exp,
        r_see_invisible=r_see_invisible,
        maintain_armor=maintain_armor,
        auto_search=auto_search,
    )


def parse_hand_key(key: str) -> Optional[Hand]:
    """Map a keypress to a hand.

    ``l``/``L`` and ``r``/``R`` give a hand; escape, newline and return cancel
    and give ``None``.  Any other key is rejected with ``ValueError`` so the
    caller can keep asking.
    """
    if key in _CANCEL_KEYS:
        return None
    lowered = key.lower() if len(key) == 1 else key
    if lowered == "l":
        return Hand.LEFT
    if lowered == "r":
        return Hand.RIGHT
    raise ValueError(f"not a hand: {key!r}")


class RingHands:
    """The two ring fingers of the rogue."""

    def __init__(self) -> None:
        self.left: Optional[Ring] = None
        self.right: Optional[Ring] = None

    def _on(self, hand: Hand) -> Optional[Ring]:
        return self.left if hand is Hand.LEFT else self.right

    def _set(self, hand: Hand, ring: Optional[Ring]) -> None:
        if hand is Hand.LEFT:
            self.left = ring
        else:
            self.right = ring

    def _free_hand(self) -> Optional[Hand]:
        """The only free hand when exactly one ring is worn, else ``None``."""
        if self.left is not None and self.right is None:
            return Hand.RIGHT
        if self.left is None and self.right is not None:
            return Hand.LEFT
        return None

    def choose_hand(self, key: Optional[str] = None) -> Optional[Hand]:
        """Pick the hand for a new ring; with one ring worn the key is ignored."""
        if self.left is not None and self.right is not None:
            raise RingError("wearing two rings already")
        free = self._free_hand()
        if free is not None:
            return free
        if key is None:
            return None
        return parse_hand_key(key)

    def put_on(self, ring: Ring, hand: Optional[Hand] = None) -> Hand:
        """Put a ring on; returns the hand it went on."""
        if self.left is not None and self.right is not None:
            raise RingError("wearing two rings already")
        if not isinstance(ring, Ring):
            raise RingError("that's not a ring")
        if ring.worn or ring is self.left or ring is self.right:
            raise RingError("that ring is already being worn")
        if hand is None:
            hand = self._free_hand()
            if hand is None:
                raise RingError("left or right hand?")
        if self._on(hand) is not None:
            raise RingError("there's already a ring on that hand")
        ring.hand = hand
        self._set(hand, ring)
        return hand

    def remove(self, hand: Optional[Hand] = None) -> Ring:
        """Remove a ring by hand; cursed rings refuse to come off."""
        if self.left is None and self.right is None:
            raise RingError("not wearing any rings")
        if hand is None:
            if self.left is not None and self.right is not None:
                raise RingError("left or right hand?")
            hand = Hand.LEFT if self.left is not None else Hand.RIGHT
        ring = self._on(hand)
        if ring is None:
            raise RingError("there's no ring on that hand")
        if ring.cursed:
            raise RingError("you can't, it appears to be cursed")
        self.take_off(ring)
        return ring

    def take_off(self, ring: Optional[Ring]) -> Optional[Ring]:
        """Take a ring off whatever hand it is on, ignoring curses."""
        if ring is None:
            return None
        if ring.hand is Hand.LEFT or (ring.hand is None and ring is self.left):
            if self.left is ring:
                self.left = None
        elif ring.hand is Hand.RIGHT or ring is self.right:
            if self.right is ring:
                self.right = None
        ring.hand = None
        return ring

    def worn(self) -> list[Ring]:
        """The rings being worn, left hand first."""
        return [ring for ring in (self.left, self.right) if ring is not None]

    def stats(self) -> RingStats:
        """The combined effects of the worn rings."""
        return compute_ring_stats(self.left, self.right)