"""Tests for the gesture session store."""

from boundingbox.geometry import RectElement
from boundingbox.model import InteractionSession, SessionStore
from boundingbox.utils import AxisFlags, Handle


def test_session_parses_axes_once():
    session = InteractionSession(handle=Handle.NE, original_width=5, original_height=6)

    assert session.axes == AxisFlags(vertical="n", horizontal="e")
    assert session.is_resize
    assert not session.is_move


def test_empty_session_is_neither_move_nor_resize():
    session = InteractionSession(handle=Handle.NONE, original_width=1, original_height=1)

    assert session.axes.is_empty
    assert not session.is_move
    assert not session.is_resize


def test_store_distinguishes_absent_from_empty_handle():
    store = SessionStore()
    element = RectElement()

    assert store.get(element) is None
    assert element not in store

    store.begin(element, InteractionSession(handle=Handle.NONE, original_width=1, original_height=1))
    assert element in store
    assert store.get(element).handle == Handle.NONE

    ended = store.end(element)
    assert ended.handle == Handle.NONE
    assert element not in store
    assert store.end(element) is None


def test_store_keys_by_identity():
    store = SessionStore()
    first = RectElement(0, 0, 10, 10)
    twin = RectElement(0, 0, 10, 10)

    store.begin(first, InteractionSession(handle=Handle.MOVE, original_width=10, original_height=10))

    assert twin not in store
    assert len(store) == 1
