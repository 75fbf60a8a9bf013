"""Tests for sequence cursor."""

import random

import pytest
from fibcursor.cursor import SequenceCursor

F_1000 = (
    "26863810024485359386146727202142923967616609318986952340123175997617981700247881"
    "68933836965448335656419182785616144335631297667364221035032463485041037768036733"
    "4151172899169723197082763985615764450078474174626"
)


def expected_terms(count):
    """Terms returned by ``count`` advances from a fresh cursor."""
    terms = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def value_at(step):
    """Current term after ``step`` net advances."""
    return 0 if step == 0 else expected_terms(step)[-1]


class TestSequenceCursor:
    """Test SequenceCursor class."""

    def test_initial_state(self):
        """Test cursor starts at step 0 with the seed window."""
        cursor = SequenceCursor()
        assert cursor.step == 0
        assert cursor.window == (0,)
        assert cursor.peek() == 0

    def test_first_10_advances(self):
        """Test first ten advances follow the sequence."""
        cursor = SequenceCursor()
        values = [cursor.advance() for _ in range(10)]
        assert values == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_first_10_peeks(self):
        """Test peek after each advance matches the advanced value."""
        cursor = SequenceCursor()
        peeks = []
        for _ in range(10):
            cursor.advance()
            peeks.append(cursor.peek())
        assert peeks == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_1000th_term(self):
        """Test 1000 advances reach the exact 209 digit term."""
        cursor = SequenceCursor()
        for _ in range(1000):
            cursor.advance()

        current = str(cursor.peek())
        assert len(current) == 209
        assert current == F_1000
        assert cursor.peek() == expected_terms(1000)[-1]

    def test_first_10_retreats(self):
        """Test retreating back down to the floor."""
        cursor = SequenceCursor()
        for _ in range(11):
            cursor.advance()

        values = [cursor.retreat() for _ in range(10)]
        assert values == [34, 21, 13, 8, 5, 3, 2, 1, 1, 0]

        # Should never go below 0
        assert cursor.retreat() == 0
        assert cursor.retreat() == 0
        assert cursor.step == 0

    def test_retreat_at_floor(self):
        """Test retreat on a fresh cursor leaves it untouched."""
        cursor = SequenceCursor()
        for _ in range(5):
            assert cursor.retreat() == 0
        assert cursor.step == 0
        assert cursor.window == (0,)
        assert cursor.advance() == 0

    def test_early_forward_and_back(self):
        """Test interleaving through the bootstrap terms."""
        cursor = SequenceCursor()
        operations = [
            ("advance", 0), ("advance", 1), ("retreat", 0),
            ("advance", 1), ("advance", 1), ("retreat", 1),
            ("retreat", 0), ("advance", 1), ("advance", 1),
            ("advance", 2), ("retreat", 1), ("retreat", 1),
            ("retreat", 0),
        ]
        for name, expected in operations:
            assert getattr(cursor, name)() == expected, f"{name} at step {cursor.step}"

    def test_advance_then_retreat(self):
        """Test retreat undoes advance at every step."""
        cursor = SequenceCursor()
        terms = expected_terms(30)
        for n in range(29):
            assert cursor.advance() == terms[n]
            assert cursor.advance() == terms[n + 1]
            assert cursor.retreat() == terms[n]

    def test_retreat_then_advance(self):
        """Test advance repeats the value stepped past by retreat."""
        cursor = SequenceCursor()
        for _ in range(4):
            cursor.advance()

        assert cursor.peek() == 2
        assert cursor.retreat() == 1
        assert cursor.advance() == 2
        assert cursor.peek() == 2

    def test_peek_after_retreat_into_bootstrap(self):
        """Test peek at step 2 reached by stepping back from step 3."""
        cursor = SequenceCursor()
        for _ in range(3):
            cursor.advance()

        assert cursor.retreat() == 1
        assert cursor.step == 2
        assert cursor.peek() == 1

    def test_peek_does_not_move(self):
        """Test peek has no side effects."""
        cursor = SequenceCursor()
        for _ in range(7):
            cursor.advance()

        window = cursor.window
        assert cursor.peek() == 8
        assert cursor.peek() == 8
        assert cursor.step == 7
        assert cursor.window == window

    def test_window_stays_bounded(self):
        """Test the window never holds more than three terms."""
        cursor = SequenceCursor()
        for _ in range(200):
            cursor.advance()
            assert 1 <= len(cursor.window) <= 3

        assert cursor.window == tuple(expected_terms(200)[-3:])

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
    def test_random_walk_round_trip(self, seed):
        """Test every reachable state reports the term at its step."""
        rng = random.Random(seed)
        cursor = SequenceCursor()
        step = 0

        for _ in range(500):
            if rng.random() < 0.55:
                step += 1
                assert cursor.advance() == value_at(step)
            else:
                step = max(step - 1, 0)
                assert cursor.retreat() == value_at(step)

            assert cursor.step == step
            assert cursor.peek() == value_at(step)
            assert 1 <= len(cursor.window) <= 3
            if step == 0:
                assert cursor.window == (0,)

    def test_iterator_protocol(self):
        """Test cursor can be consumed as an iterator."""
        cursor = SequenceCursor()
        assert iter(cursor) is cursor

        values = [value for _, value in zip(range(8), cursor)]
        assert values == [0, 1, 1, 2, 3, 5, 8, 13]
        assert next(cursor) == 21
        assert cursor.step == 9

    def test_repr(self):
        """Test repr shows step and window."""
        cursor = SequenceCursor()
        cursor.advance()
        assert repr(cursor) == "SequenceCursor(step=1, window=[0, 1])"
