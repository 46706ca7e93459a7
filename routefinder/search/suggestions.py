"""
Suggestion Session
==================
Autocomplete state for a single location input field.

The session is driven by explicit transitions so any event source can
feed it: a browser bridge, the CLI's interactive mode, or tests.

    session = SuggestionSession(index)
    session.text_changed('dha')      # open with matching candidates
    session.arrow_down()             # highlight the first candidate
    session.enter()                  # commit it into the field
    session.value                    # 'Dhaka'

States are ``Closed`` (nothing shown) and ``Open`` (candidates shown,
optionally with an active candidate). Every new query rebuilds the
candidate list from scratch.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .location_index import LocationIndex

logger = logging.getLogger(__name__)

ARROW_DOWN = 'ArrowDown'
ARROW_UP = 'ArrowUp'
ENTER = 'Enter'
ESCAPE = 'Escape'


@dataclass(frozen=True)
class SuggestionState:
    """Snapshot of a session for a view to render."""

    query: str = ''
    candidates: Tuple[str, ...] = ()
    active_index: Optional[int] = None
    visible: bool = False


class SuggestionSession:
    """Autocomplete state machine for one input field."""

    def __init__(self, index: LocationIndex, value: str = ''):
        self.index = index
        self.value = value
        self._query = ''
        self._candidates: Tuple[str, ...] = ()
        self._active_index: Optional[int] = None
        self._visible = False

    # ========================================================================
    # READ ACCESSORS
    # ========================================================================

    @property
    def query(self) -> str:
        return self._query

    @property
    def candidates(self) -> Tuple[str, ...]:
        return self._candidates

    @property
    def active_index(self) -> Optional[int]:
        return self._active_index

    @property
    def active_candidate(self) -> Optional[str]:
        if self._active_index is None:
            return None
        return self._candidates[self._active_index]

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def is_open(self) -> bool:
        return self._visible

    @property
    def state(self) -> SuggestionState:
        return SuggestionState(
            query=self._query,
            candidates=self._candidates,
            active_index=self._active_index,
            visible=self._visible,
        )

    # ========================================================================
    # TRANSITIONS
    # ========================================================================

    def _close(self) -> None:
        self._candidates = ()
        self._active_index = None
        self._visible = False

    def _set_active(self, index: int) -> None:
        if not self._candidates:
            return
        self._active_index = max(0, min(index, len(self._candidates) - 1))

    def _move(self, delta: int) -> None:
        if not self._candidates:
            return
        current = -1 if self._active_index is None else self._active_index
        self._set_active(current + delta)

    def text_changed(self, value: str) -> None:
        """The field text changed: rebuild candidates for the new text."""
        self.value = value
        self._query = value
        self._close()

        candidates = self.index.search(value)
        if not candidates:
            return
        self._candidates = tuple(candidates)
        self._visible = True
        logger.debug(f"{len(candidates)} suggestions for {value!r}")

    def toggle(self) -> None:
        """Open the list for the current text (first item active), or close it."""
        if self._visible:
            self._close()
            return
        self.text_changed(self.value)
        self._set_active(0)

    def arrow_down(self) -> None:
        """Highlight the next candidate, opening the list first if needed."""
        if not self._visible:
            self.text_changed(self.value)
        self._move(1)

    def arrow_up(self) -> None:
        """Highlight the previous candidate. Stops at the first one."""
        if not self._visible:
            return
        self._move(-1)

    def commit(self) -> Optional[str]:
        """
        Put the active candidate into the field and close the list.

        Returns:
            The committed text, or None if nothing was active
        """
        candidate = self.active_candidate
        if candidate is None:
            return None
        self.value = candidate
        self._close()
        return candidate

    def enter(self) -> bool:
        """
        Enter key.

        Returns:
            True if a candidate was committed (the key press is consumed),
            False if nothing was active and the text stays as typed
        """
        return self.commit() is not None

    def pointer_select(self, index: int) -> Optional[str]:
        """Mouse-down on the candidate at ``index``: select and commit it."""
        if not 0 <= index < len(self._candidates):
            return None
        self._active_index = index
        return self.commit()

    def dismiss(self) -> None:
        """Escape or a pointer press elsewhere: close without touching the text."""
        self._close()

    def handle_key(self, key: str) -> bool:
        """
        Dispatch a key press to the matching transition.

        Args:
            key: Key name as reported by a keyboard event

        Returns:
            True if the key was consumed and its default action
            should be suppressed
        """
        if key == ARROW_DOWN:
            self.arrow_down()
            return True
        if key == ARROW_UP:
            self.arrow_up()
            return True
        if key == ENTER:
            return self.enter()
        if key == ESCAPE:
            self.dismiss()
        return False
