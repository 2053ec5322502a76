import io

import pytest

from sysdemos.state import OffState, OnState, State, Switch, main


def test_switch_starts_off():
    switch = Switch(out=io.StringIO())
    assert switch.state is OffState.instance()
    assert switch.current_state() == "OFF"


def test_turning_on_and_off():
    out = io.StringIO()
    switch = Switch(out=out)
    switch.on()
    assert switch.state is OnState.instance()
    switch.off()
    assert switch.state is OffState.instance()
    assert out.getvalue().splitlines() == [
        "Setting ON from OFF",
        "Setting OFF from ON",
    ]


def test_repeated_requests_keep_state():
    out = io.StringIO()
    switch = Switch(out=out)
    switch.off()
    switch.on()
    switch.on()
    assert switch.current_state() == "ON"
    assert out.getvalue().splitlines() == [
        "Already in OFF state",
        "Setting ON from OFF",
        "Already in ON state",
        "ON",
    ]


def test_states_are_singletons():
    assert OnState.instance() is OnState.instance()
    assert OffState.instance() is OffState.instance()
    assert OnState.instance() is not OffState.instance()


@pytest.mark.parametrize("state_class", [OnState, OffState])
def test_states_cannot_be_constructed_directly(state_class):
    with pytest.raises(TypeError):
        state_class()


def test_switches_share_state_objects():
    first = Switch(out=io.StringIO())
    second = Switch(out=io.StringIO())
    first.on()
    second.on()
    assert first.state is second.state


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "OFF",
        "Setting ON from OFF",
        "ON",
        "Setting OFF from ON",
        "OFF",
        "Already in OFF state",
        "OFF",
        "Setting ON from OFF",
        "ON",
        "Already in ON state",
        "ON",
    ]