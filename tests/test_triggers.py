import pytest

from sxpup import triggers
from sxpup.triggers import Action, Condition, GameState, HudElement, Operator


def test_midi_for_state():
    assert triggers.midi_for_state(GameState.WIN) == "win.mid"
    assert triggers.midi_for_state(GameState.LOSE_WIN) == "lwin.mid"


def test_midi_for_every_state_ends_in_mid():
    names = [triggers.midi_for_state(state) for state in GameState]
    assert all(n.endswith(".mid") for n in names)
    assert len(set(names)) == len(GameState)


def test_midi_for_invalid_state():
    with pytest.raises(ValueError):
        triggers.midi_for_state(len(GameState))


def test_parse_condition_known():
    assert triggers.parse_condition("nearer") is Condition.NEARER
    assert triggers.parse_condition("hellfire") is Condition.HELLFIRE


@pytest.mark.parametrize("member", list(Condition))
def test_condition_round_trip(member):
    assert triggers.parse_condition(member.text) is member


@pytest.mark.parametrize("member", list(Action))
def test_action_round_trip(member):
    assert triggers.parse_action(member.text) is member


@pytest.mark.parametrize("member", list(Operator))
def test_operator_round_trip(member):
    assert triggers.parse_operator(member.text) is member


def test_operator_matches_lowercased_text():
    assert triggers.parse_operator("andn") is Operator.ANDNOT
    assert triggers.parse_operator("OR") is Operator.OR


def test_parse_action_with_spaces():
    assert triggers.parse_action("  clearcounter ") is Action.CLEARCOUNTER


@pytest.mark.parametrize(
    "parser", [triggers.parse_condition, triggers.parse_operator, triggers.parse_action]
)
def test_unknown_words_raise(parser):
    with pytest.raises(ValueError):
        parser("---")


@pytest.mark.parametrize(
    "value, member",
    [
        (0, "NONE"),
        (14, "RATE_OF_CLIMB"),
        (15, "COMPASS"),
        (16, "TIME"),
        (17, "CENTER"),
    ],
)
def test_hud_elements_follow_rate_of_climb(value, member):
    assert HudElement(value) is HudElement[member]


def test_hud_element_unknown_value():
    with pytest.raises(ValueError):
        HudElement(1)