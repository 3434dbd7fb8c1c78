"""Vocabulary of mission trigger scripts and HUD elements."""

from __future__ import annotations

import enum

__all__ = [
    "GameState",
    "Condition",
    "Operator",
    "Action",
    "HudElement",
    "midi_for_state",
    "parse_condition",
    "parse_operator",
    "parse_action",
]


class GameState(enum.IntEnum):
    """Mood of the mission, which selects the background music."""

    DIRE = 0
    FLIGHT = 1
    LOSE_WIN = 2
    WIN = 3
    LOSE = 4
    COMBAT = 5
    PAD = 6
    SCARY = 7


_MIDI = (
    "dire.mid",
    "flight.mid",
    "lwin.mid",
    "win.mid",
    "lose.mid",
    "combat.mid",
    "pad.mid",
    "scary.mid",
)


class Condition(enum.IntEnum):
    """Conditions that a trigger can test."""

    NEARER = 0
    FARTHER = 1
    ALIVE = 2
    INTACT = 3
    KILLED = 4
    DESTROYED = 5
    BELOW = 6
    ABOVE = 7
    COUNTER = 8
    TIME = 9
    WAYPOINT = 10
    DAMAGE = 11
    ENCOUNTER = 12
    ATTACKED = 13
    FACES = 14
    WEAPON = 15
    HELLFIRE = 16

    @property
    def text(self) -> str:
        return _CONDITION_TEXT[self.value]


_CONDITION_TEXT = (
    "nearer",
    "farther",
    "alive",
    "intact",
    "killed",
    "destroyed",
    "below",
    "above",
    "counter",
    "time",
    "waypoint",
    "damage",
    "encounter",
    "attacked",
    "faces",
    "weapon",
    "hellfire",
)


class Operator(enum.IntEnum):
    """How a condition combines with the ones before it."""

    AND = 0
    ANDNOT = 1
    OR = 2

    @property
    def text(self) -> str:
        return _OPERATOR_TEXT[self.value]


_OPERATOR_TEXT = ("and", "andN", "or")


class Action(enum.IntEnum):
    """Actions a trigger performs when its conditions hold."""

    TEXT = 0
    FLASH = 1
    PLAY = 2
    VAPORIZE = 3
    ELIMINATE = 4
    WIN = 5
    CLEARCOUNTER = 6
    ROUTE = 7
    SETAI = 8

    @property
    def text(self) -> str:
        return _ACTION_TEXT[self.value]


_ACTION_TEXT = (
    "text",
    "flash",
    "play",
    "vaporize",
    "eliminate",
    "win",
    "clearcounter",
    "route",
    "setai",
)


class HudElement(enum.IntEnum):
    """Elements of the head-up display that a tutorial can flash."""

    NONE = 0
    WAYPOINT = 4
    WEAPONS = 5
    ALT_ABOVE_SEA = 7
    ALTITUDE = 8
    RADAR = 9
    TORQUE = 11
    VELOCITY_VEC = 12
    GROUNDVEL = 13
    RATE_OF_CLIMB = 14
    COMPASS = 15
    TIME = 16
    CENTER = 17


def midi_for_state(state: GameState | int) -> str:
    """Return the music file played in ``state``."""
    return _MIDI[GameState(state).value]


def _lookup(kind: type[enum.IntEnum], texts: tuple[str, ...], text: str):
    wanted = text.strip().lower()
    for member, word in zip(kind, texts):
        if word.lower() == wanted:
            return member
    raise ValueError(f"unknown {kind.__name__.lower()} {text!r}")


def parse_condition(text: str) -> Condition:
    """Return the condition named by ``text`` (case-insensitive)."""
    return _lookup(Condition, _CONDITION_TEXT, text)


def parse_operator(text: str) -> Operator:
    """Return the operator named by ``text`` (case-insensitive)."""
    return _lookup(Operator, _OPERATOR_TEXT, text)


def parse_action(text: str) -> Action:
    """Return the action named by ``text`` (case-insensitive)."""
    return _lookup(Action, _ACTION_TEXT, text)