# tests/chain/test_node.py
"""
WrappedError node behaviour - immutability, identity, Python integration
"""

import copy
import pickle
import traceback

import pytest

import errtrace
from errtrace import Location, WrappedError, is_wrapped


def test_fields_are_read_only():
    err = errtrace.wrap(errtrace.new_root("root"), "ctx")

    with pytest.raises(AttributeError):
        err.message = "changed"
    with pytest.raises(AttributeError):
        err.predecessor = None
    with pytest.raises(AttributeError):
        err.location = Location("x.py", 1)

    assert err.message == "ctx"


def test_nodes_compare_by_identity():
    a = errtrace.new_root("error")
    b = errtrace.new_root("error")

    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_can_be_raised_and_caught():
    with pytest.raises(WrappedError) as exc_info:
        raise errtrace.wrap(ValueError("bad value"), "validating form")

    assert str(exc_info.value) == "bad value"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_python_traceback_shows_chain():
    try:
        raise errtrace.wrap(ValueError("bad value"), "validating form")
    except WrappedError as e:
        text = "".join(traceback.format_exception(e))

    assert "ValueError: bad value" in text
    assert "direct cause" in text


def test_str_of_deep_chain_is_iterative():
    err = errtrace.new_root("bottom")
    for i in range(5000):
        err = errtrace.wrap(err, f"level {i}")

    assert str(err) == "bottom"
    assert len(errtrace.get_trace(err)) == 5001


def test_copy_keeps_chain():
    root = errtrace.new_root("root")
    err = errtrace.wrap(root, "ctx")

    clone = copy.copy(err)

    assert clone is not err
    assert clone.message == "ctx"
    assert clone.predecessor is root
    assert str(clone) == "root"


def test_location_str():
    assert str(Location("/src/app.py", 12, "main")) == "/src/app.py:12"


def test_is_wrapped():
    assert is_wrapped(errtrace.new_root("x"))
    assert not is_wrapped(ValueError("x"))
    assert not is_wrapped(None)


def test_copy_keeps_notes():
    err = errtrace.wrap(errtrace.new_root("root"), "ctx")
    err.add_note("request id 7")

    clone = copy.copy(err)

    assert clone.__notes__ == ["request id 7"]
    assert clone.message == "ctx"


def test_pickle_keeps_chain_and_notes():
    err = errtrace.wrap(errtrace.new_root("root"), "ctx")
    err.add_note("request id 7")

    clone = pickle.loads(pickle.dumps(err))

    assert clone.message == "ctx"
    assert clone.predecessor.message == "root"
    assert str(clone) == "root"
    assert clone.__notes__ == ["request id 7"]


def test_root_unwraps_to_itself():
    root = errtrace.new_root("root")

    assert root.unwrap() is root
    assert errtrace.unwrap(root) is root


def test_bare_root_no_match_terminates():
    root = errtrace.new_root("root")

    assert not errtrace.is_(root, ValueError("other"))
    assert not errtrace.is_(root, errtrace.new_root("root"))
    assert errtrace.as_(root, KeyError) is None
    assert errtrace.is_(root, root)
