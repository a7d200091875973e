"""Unit tests for the fetch pipeline state machine."""

import pytest

from wowapi.fetch import FetchState, FetchStateMachine, FetchStateTransitionError


URL = "https://us.api.battle.net/wow/boss/"


def _walk(machine: FetchStateMachine, *states: FetchState) -> None:
    for state in states:
        machine.transition_to(state)


class TestFetchStateMachine:
    """Tests for FetchStateMachine."""

    def test_initial_state(self) -> None:
        """Machine should start in START."""
        machine = FetchStateMachine(URL)

        assert machine.state == FetchState.START
        assert machine.history == (FetchState.START,)
        assert not machine.is_terminal

    def test_fresh_hit_path(self) -> None:
        """A fresh hit should return without a network call."""
        machine = FetchStateMachine(URL)

        _walk(
            machine,
            FetchState.CACHE_CHECK,
            FetchState.CACHE_HIT_FRESH,
            FetchState.RETURN_CACHED,
            FetchState.DONE,
        )

        assert machine.is_terminal
        assert FetchState.NETWORK_CALL not in machine.history

    def test_revalidation_path(self) -> None:
        """A stale hit answered with 304 should end in DONE."""
        machine = FetchStateMachine(URL)

        _walk(
            machine,
            FetchState.CACHE_CHECK,
            FetchState.CACHE_HIT_STALE,
            FetchState.NETWORK_CALL,
            FetchState.RETURN_304_CACHED,
            FetchState.DONE,
        )

        assert machine.state == FetchState.DONE

    def test_failure_path(self) -> None:
        """A failed network call should end in FAILED."""
        machine = FetchStateMachine(URL)

        _walk(machine, FetchState.CACHE_CHECK, FetchState.CACHE_MISS, FetchState.NETWORK_CALL)
        machine.transition_to(FetchState.FAILED)

        assert machine.is_terminal

    @pytest.mark.parametrize(
        "path",
        [
            (FetchState.NETWORK_CALL,),
            (FetchState.CACHE_CHECK, FetchState.CACHE_HIT_FRESH, FetchState.NETWORK_CALL),
            (FetchState.CACHE_CHECK, FetchState.CACHE_MISS, FetchState.RETURN_CACHED),
            (FetchState.CACHE_CHECK, FetchState.CACHE_MISS, FetchState.FAILED),
        ],
    )
    def test_illegal_transitions(self, path: tuple[FetchState, ...]) -> None:
        """Transitions outside the graph should raise."""
        machine = FetchStateMachine(URL)

        with pytest.raises(FetchStateTransitionError) as exc_info:
            _walk(machine, *path)

        assert exc_info.value.url == URL

    def test_no_transition_out_of_terminal_state(self) -> None:
        """DONE should accept no further transitions."""
        machine = FetchStateMachine(URL)
        _walk(
            machine,
            FetchState.CACHE_CHECK,
            FetchState.CACHE_HIT_FRESH,
            FetchState.RETURN_CACHED,
            FetchState.DONE,
        )

        assert not machine.can_transition_to(FetchState.CACHE_CHECK)
        with pytest.raises(FetchStateTransitionError, match="DONE -> CACHE_CHECK"):
            machine.transition_to(FetchState.CACHE_CHECK)
