import unittest

from muttum import AlphabetTracker, Board, LetterState


class BoardTests(unittest.TestCase):
    def test_fill_and_clear_cells(self) -> None:
        board = Board("table", rows=2)
        self.assertEqual(board.row_word(0), "t....")
        self.assertEqual(board.first_empty_column(0), 1)
        self.assertEqual(board.last_filled_column(0, start=1), None)

        for col, ch in enumerate("able", start=1):
            board.set_letter(0, col, ch)
        self.assertTrue(board.is_row_complete(0))
        self.assertEqual(board.last_filled_column(0, start=1), 4)

        board.clear_letter(0, 4)
        self.assertEqual(board.row_word(0), "tabl.")
        self.assertFalse(board.is_row_complete(0))

    def test_states_array_is_a_copy(self) -> None:
        board = Board("table")
        board.set_state(0, 0, LetterState.WELL_PLACED)
        states = board.states_array()
        self.assertEqual(states.shape, (6, 5))
        states.fill(0)
        self.assertEqual(board.letter(0, 0).state, LetterState.WELL_PLACED)

    def test_invalid_board(self) -> None:
        with self.assertRaises(ValueError):
            Board("")
        with self.assertRaises(ValueError):
            Board("table", rows=0)


class AlphabetTrackerTests(unittest.TestCase):
    def test_present_credit_is_capped(self) -> None:
        alphabet = AlphabetTracker("melee")
        alphabet.reset_found()
        self.assertTrue(alphabet.credit_present("m"))
        self.assertFalse(alphabet.credit_present("m"))
        self.assertEqual(alphabet.state("m"), LetterState.PRESENT)
        self.assertFalse(alphabet.credit_present("z"))
        self.assertEqual(alphabet.state("z"), LetterState.NOT_PRESENT)

    def test_well_placed_is_never_downgraded(self) -> None:
        alphabet = AlphabetTracker("melee")
        alphabet.mark_well_placed("l")
        self.assertFalse(alphabet.credit_present("l"))
        self.assertEqual(alphabet.state("l"), LetterState.WELL_PLACED)

        alphabet.reset_found()
        self.assertTrue(alphabet.credit_present("l"))
        self.assertEqual(alphabet.state("l"), LetterState.WELL_PLACED)

    def test_found_count_resets_each_pass(self) -> None:
        alphabet = AlphabetTracker("melee")
        for _ in range(3):
            alphabet.credit_present("e")
        self.assertEqual(alphabet.snapshot()[4].found_count, 3)
        alphabet.reset_found()
        entry = alphabet.snapshot()[4]
        self.assertEqual(entry.character, "e")
        self.assertEqual(entry.found_count, 0)
        self.assertEqual(entry.state, LetterState.PRESENT)

    def test_characters_outside_alphabet(self) -> None:
        alphabet = AlphabetTracker("l'eau")
        self.assertEqual(alphabet.state("'"), LetterState.UNKNOWN)
        self.assertFalse(alphabet.credit_present("'"))
        self.assertEqual(alphabet.snapshot()[ord("u") - ord("a")].positions, (4,))


if __name__ == "__main__":
    unittest.main()
