# rogueclone

Ring handling for a classic dungeon-crawling role-playing game. The package
generates rings, puts them on the left or right hand, takes them off again,
and works out what the rings being worn add up to.

## Installation

```
pip install rogueclone
```

To run the tests:

```
pip install "rogueclone[test]"
pytest
```

## Overview

Everything lives in `rogueclone.rings`:

- `RingKind`: the kinds of ring: stealth, teleportation, regeneration, slow
  digestion, add strength, sustain strength, dexterity, adornment, see
  invisible, maintain armor and searching.
- `Hand`: left (`"l"`) or right (`"r"`).
- `Ring`: one ring, with its `kind`, its `enchantment` (only meaningful for
  strength and dexterity rings), whether it is `cursed`, and the `hand` it is
  on. The `worn` property tells whether it is on a hand.
- `generate_ring(kind=None, rng=None)`: makes a new ring. If `kind` is `None`,
  a kind is chosen at random; `rng` is a `random.Random` (a fresh one is used
  if none is given). Teleportation rings are always cursed. Strength and
  dexterity rings get an enchantment of -2, -1, +1 or +2 and are cursed when it
  is negative. Adornment rings are cursed on a coin toss.
- `compute_ring_stats(left, right)`: returns a `RingStats` summary of what the
  two rings (either may be `None`) give: `stealthy`, `r_rings` (how many are
  worn), `e_rings` (hunger from rings; slow digestion lowers it),
  `r_teleport`, `sustain_strength`, `add_strength`, `regeneration`,
  `ring_exp`, `r_see_invisible`, `maintain_armor` and `auto_search`.
- `parse_hand_key(key)`: turns a key the player pressed into a `Hand`. `l`/`L`
  give the left hand and `r`/`R` the right; escape (`CANCEL_KEY`), newline and
  carriage return cancel and give `None`; any other key raises `ValueError`.
- `RingHands`: the player's two ring fingers, with `left` and `right`
  attributes.
  - `choose_hand(key=None)`: when one ring is worn, returns the free hand and
    ignores the key; when none is worn, reads the key with `parse_hand_key`
    (or returns `None` without a key); when both are worn, raises `RingError`.
  - `put_on(ring, hand=None)`: puts a ring on and returns the hand it went on.
    Without a hand it uses the only free hand, or raises `RingError` if the
    choice is open.
  - `remove(hand=None)`: takes a ring off a hand and returns it. Cursed rings
    refuse to come off.
  - `take_off(ring)`: takes a ring off whatever hand it is on, ignoring curses.
  - `worn()`: the rings being worn, left hand first.
  - `stats()`: `compute_ring_stats` for the two hands.
- `RingError`: raised when a ring action is refused, for example when both
  hands are already full, the ring is already worn, the chosen hand is taken,
  no ring is on the hand, or a cursed ring is being removed.

## Example

```python
import random

from rogueclone.rings import Hand, RingHands, RingKind, generate_ring

rng = random.Random(7)
hands = RingHands()

ring = generate_ring(RingKind.SEARCHING, rng)
hands.put_on(ring, Hand.LEFT)

print(hands.worn())
print(hands.stats().auto_search)   # 2

hands.remove(Hand.LEFT)
```

## What it does not do

This package covers rings only. It has no game to play, no command to run, no
screen or messages to show the player, no inventory or pack, and no saved
games. Callers turn a `RingError` into whatever message they show, and redraw
their own status line after the ring stats change.