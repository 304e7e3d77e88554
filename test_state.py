"""
Tests for the state model: PuzzleState, StateKey encoding and the solved check.
"""

import numpy as np
import pytest

from tower_of_hanoi.state import (
    PuzzleState,
    StateKeyError,
    deserialize,
    is_solved,
    serialize,
)


def test_initial_state():
    """Test state representation."""
    print("=" * 60)
    print("Testing State Representation")
    print("=" * 60)

    state = PuzzleState.initial(3, 1)
    print(f"Initial state: {state}")

    assert state.peg(1) == [3, 2, 1], "All disks start on peg 1, largest at the bottom"
    assert state.peg(2) == [] and state.peg(3) == []
    assert state.top(1) == 1
    assert state.top(2) == 0, "Empty peg has no top disk"
    assert state.height(1) == 3
    assert state.slots.shape == (3, 3)

    state = PuzzleState.initial(4, 2)
    assert state.pegs() == [[], [4, 3, 2, 1], []]
    print()


def test_serialize_format():
    assert serialize(PuzzleState.initial(3, 1)) == "(3,2,1,)(0,0,0,)(0,0,0,)"
    assert serialize(PuzzleState.initial(1, 3)) == "(0,)(0,)(1,)"

    state = PuzzleState.from_pegs([[3], [2, 1], []])
    assert serialize(state) == "(3,0,0,)(2,1,0,)(0,0,0,)"

    # Sizes above 9 keep their separators
    state = PuzzleState.initial(10, 1)
    assert serialize(state).startswith("(10,9,8,7,6,5,4,3,2,1,)")


def test_round_trip():
    keys = [
        "(3,2,1,)(0,0,0,)(0,0,0,)",
        "(0,0,0,)(3,1,0,)(2,0,0,)",
        "(1,0,)(2,0,)(0,0,)",
        "(0,)(1,)(0,)",
        "(0,0,0,0,)(4,3,0,0,)(2,1,0,0,)",
    ]
    for key in keys:
        assert serialize(deserialize(key)) == key, f"Round trip changed {key}"


def test_deserialize_rejects_malformed_keys():
    print("=" * 60)
    print("Testing StateKey Validation")
    print("=" * 60)

    bad_keys = [
        "",
        "(3,2,1,)(0,0,0,)",  # two pegs
        "(3,2,1,)(0,0,0,)(0,0,0,)(0,0,0,)",  # four pegs
        "(3,2,1)(0,0,0,)(0,0,0,)",  # missing terminating comma
        "(3,2,1,)(0,0,)(0,0,0,)",  # ragged groups
        "()()()",  # no slots
        "(3,2,1,) (0,0,0,)(0,0,0,)",  # stray text
        "(a,2,1,)(0,0,0,)(0,0,0,)",
        "(3,2,1,)(0,0,0,)(0,0,0,)x",
        "(٣,٢,١,)(0,0,0,)(0,0,0,)",  # non-ASCII digits
        "(03,2,1,)(0,0,0,)(0,0,0,)",  # leading zero
        "(3,2,1,)(00,0,0,)(0,0,0,)",
        "(3,2,+1,)(0,0,0,)(0,0,0,)",
    ]
    for key in bad_keys:
        with pytest.raises(StateKeyError):
            deserialize(key)
    print(f"✓ {len(bad_keys)} malformed keys rejected")


def test_deserialize_rejects_illegal_placements():
    illegal = [
        "(1,2,3,)(0,0,0,)(0,0,0,)",  # larger on smaller
        "(3,0,1,)(2,0,0,)(0,0,0,)",  # gap on peg 1
        "(3,2,0,)(0,0,0,)(0,0,0,)",  # disk 1 missing
        "(3,2,1,)(1,0,0,)(0,0,0,)",  # disk 1 twice
        "(3,2,9,)(0,0,0,)(0,0,0,)",  # disk larger than slot count
    ]
    for key in illegal:
        with pytest.raises(StateKeyError) as excinfo:
            deserialize(key)
        assert excinfo.value.key == key

    # StateKeyError is a ValueError, so callers can treat both alike
    with pytest.raises(ValueError):
        deserialize("garbage")


def test_deserialize_accepts_only_canonical_keys():
    """Every key deserialize() accepts is exactly the key serialize() writes back."""
    variants = [
        "(3,2,01,)(0,0,0,)(0,0,0,)",
        "(3,2,1,)(0,0,0,)(0,0,000,)",
        "(\uff13,2,1,)(0,0,0,)(0,0,0,)",  # fullwidth digit three
    ]
    for key in variants:
        with pytest.raises(StateKeyError):
            deserialize(key)

    state = PuzzleState.initial(10, 2)
    key = serialize(state)
    assert serialize(deserialize(key)) == key
    assert deserialize(key) == state


def test_state_is_not_hashable():
    state = PuzzleState.initial(3, 1)
    with pytest.raises(TypeError):
        hash(state)
    with pytest.raises(TypeError):
        {state}

    # StateKeys are the hashable form
    seen = {serialize(state)}
    state.slots[0, 2] = 0
    state.slots[1, 0] = 1
    assert serialize(state) not in seen


def test_from_pegs_validation():
    with pytest.raises(ValueError):
        PuzzleState.from_pegs([[1, 2], [], []])
    with pytest.raises(ValueError):
        PuzzleState.from_pegs([[2, 1], []])
    with pytest.raises(ValueError):
        PuzzleState(0)


def test_is_solved():
    assert is_solved(PuzzleState.initial(3, 3), 3)
    assert not is_solved(PuzzleState.initial(3, 1), 3)
    assert is_solved(PuzzleState.initial(3, 1), 1)
    assert not is_solved(PuzzleState.from_pegs([[1], [], [3, 2]]), 3)
    assert is_solved(PuzzleState.solved(5, 2), 2)

    with pytest.raises(ValueError):
        is_solved(PuzzleState.initial(3, 1), 4)


def test_copy_and_restore():
    state = PuzzleState.initial(3, 1)
    snapshot = state.copy()
    state.slots[0, 2] = 0
    state.slots[2, 0] = 1

    assert snapshot.peg(1) == [3, 2, 1], "Snapshot must not share slots with the live state"
    slots_id = id(state.slots)
    state.restore(snapshot)
    assert id(state.slots) == slots_id, "restore() works in place"
    assert state == snapshot
    assert np.array_equal(state.slots, snapshot.slots)

    with pytest.raises(ValueError):
        state.restore(PuzzleState.initial(2, 1))


def main():
    """Run all tests."""
    print("\n" + "=" * 60)
    print("RUNNING STATE MODEL TESTS")
    print("=" * 60 + "\n")

    test_initial_state()
    test_serialize_format()
    test_round_trip()
    test_deserialize_rejects_malformed_keys()
    test_deserialize_rejects_illegal_placements()
    test_deserialize_accepts_only_canonical_keys()
    test_state_is_not_hashable()
    test_from_pegs_validation()
    test_is_solved()
    test_copy_and_restore()

    print("=" * 60)
    print("ALL TESTS PASSED! ✓")
    print("=" * 60)


if __name__ == "__main__":
    main()
