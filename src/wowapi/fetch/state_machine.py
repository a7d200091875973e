"""State machine for a single fetch pipeline call."""

from enum import Enum

import structlog

from wowapi.config.constants import COMPONENT_FETCH


logger = structlog.get_logger()


class FetchState(str, Enum):
    """State of one pipeline call.

    - START: Call received
    - CACHE_CHECK: Looking up the cache engine
    - CACHE_HIT_FRESH: Cached envelope inside the freshness window
    - CACHE_HIT_STALE: Cached envelope outside the freshness window
    - CACHE_MISS: Nothing cached for the key
    - RETURN_CACHED: Serving the fresh cached envelope, no network
    - NETWORK_CALL: Request to the origin in progress
    - RETURN_304_CACHED: Origin revalidated the cached envelope
    - RETURN_FRESH: Origin sent a new body
    - DONE: Envelope returned
    - FAILED: Transport or API failure
    """

    START = "START"
    CACHE_CHECK = "CACHE_CHECK"
    CACHE_HIT_FRESH = "CACHE_HIT_FRESH"
    CACHE_HIT_STALE = "CACHE_HIT_STALE"
    CACHE_MISS = "CACHE_MISS"
    RETURN_CACHED = "RETURN_CACHED"
    NETWORK_CALL = "NETWORK_CALL"
    RETURN_304_CACHED = "RETURN_304_CACHED"
    RETURN_FRESH = "RETURN_FRESH"
    DONE = "DONE"
    FAILED = "FAILED"


_VALID_TRANSITIONS: dict[FetchState, set[FetchState]] = {
    FetchState.START: {FetchState.CACHE_CHECK},
    FetchState.CACHE_CHECK: {
        FetchState.CACHE_HIT_FRESH,
        FetchState.CACHE_HIT_STALE,
        FetchState.CACHE_MISS,
    },
    FetchState.CACHE_HIT_FRESH: {FetchState.RETURN_CACHED},
    FetchState.CACHE_HIT_STALE: {FetchState.NETWORK_CALL},
    FetchState.CACHE_MISS: {FetchState.NETWORK_CALL},
    FetchState.RETURN_CACHED: {FetchState.DONE},
    FetchState.NETWORK_CALL: {
        FetchState.RETURN_304_CACHED,
        FetchState.RETURN_FRESH,
        FetchState.FAILED,
    },
    FetchState.RETURN_304_CACHED: {FetchState.DONE},
    FetchState.RETURN_FRESH: {FetchState.DONE},
    FetchState.DONE: set(),  # Terminal state
    FetchState.FAILED: set(),  # Terminal state
}


class FetchStateTransitionError(Exception):
    """Raised when an illegal state transition is attempted."""

    def __init__(self, url: str, from_state: FetchState, to_state: FetchState) -> None:
        self.url = url
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Illegal fetch state transition for '{url}': "
            f"{from_state.value} -> {to_state.value}"
        )


class FetchStateMachine:
    """Tracks and validates the states one pipeline call moves through.

    Every transition is logged at debug level; the visited path is kept so
    callers and tests can tell which branch a call took.
    """

    def __init__(self, url: str) -> None:
        self._url = url
        self._state = FetchState.START
        self._history: list[FetchState] = [FetchState.START]
        self._log = logger.bind(component=COMPONENT_FETCH, url=url)

    @property
    def state(self) -> FetchState:
        """Get the current state."""
        return self._state

    @property
    def history(self) -> tuple[FetchState, ...]:
        """Get every state visited, in order."""
        return tuple(self._history)

    @property
    def is_terminal(self) -> bool:
        """Check if current state is terminal."""
        return self._state in (FetchState.DONE, FetchState.FAILED)

    def can_transition_to(self, target: FetchState) -> bool:
        """Check if a transition to the target state is valid."""
        return target in _VALID_TRANSITIONS.get(self._state, set())

    def transition_to(self, target: FetchState) -> None:
        """Transition to a new state.

        Args:
            target: The target state.

        Raises:
            FetchStateTransitionError: If the transition is invalid.
        """
        if not self.can_transition_to(target):
            self._log.error(
                "illegal_state_transition",
                from_state=self._state.value,
                to_state=target.value,
            )
            raise FetchStateTransitionError(self._url, self._state, target)

        self._log.debug(
            "state_transition",
            from_state=self._state.value,
            to_state=target.value,
        )
        self._state = target
        self._history.append(target)
