import io
import os
import tempfile
import unittest
from pathlib import Path

from muttum.cli import main


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        handle, name = tempfile.mkstemp(suffix=".txt")
        os.close(handle)
        self.path = Path(name)
        self.path.write_text("table\ntigre\ntapis\nfable\n", encoding="utf-8")

    def tearDown(self) -> None:
        self.path.unlink()

    def run_cli(self, *args: str, stdin: str) -> "tuple[int, str]":
        out = io.StringIO()
        code = main(["--dictionary", str(self.path), *args], stdin=io.StringIO(stdin), stdout=out)
        return code, out.getvalue()

    def test_scripted_win(self) -> None:
        code, output = self.run_cli("--word", "table", stdin="tigre\nab\n-\n\ntable\n")
        self.assertEqual(code, 0)
        self.assertIn("You must fill all letters.", output)
        self.assertIn("Congratulations", output)

    def test_unknown_word_message(self) -> None:
        code, output = self.run_cli("--word", "table", stdin="tzzzz\n")
        self.assertEqual(code, 0)
        self.assertIn("This word doesn't exist in our dictionary.", output)

    def test_whole_word_must_start_with_revealed_letter(self) -> None:
        code, output = self.run_cli("--word", "table", stdin="fable\n")
        self.assertEqual(code, 0)
        self.assertIn("The word must start with T.", output)
        self.assertNotIn("Congratulations", output)
        self.assertNotIn("T+ A+ B+ L+ E+", output)

    def test_whole_word_is_not_shifted_by_hint_rule(self) -> None:
        code, output = self.run_cli("--word", "table", stdin="ttaaa\n")
        self.assertEqual(code, 0)
        self.assertIn("This word cannot be typed on this row.", output)
        self.assertNotIn("You must fill all letters.", output)
        self.assertNotIn("Congratulations", output)

    def test_loss_reveals_display_word(self) -> None:
        code, output = self.run_cli("--word", "Tâble", "--rows", "1", stdin="tigre\n")
        self.assertEqual(code, 0)
        self.assertIn("The word was: Tâble", output)

    def test_seeded_random_game(self) -> None:
        code, output = self.run_cli("--seed", "3", "--max-length", "5", stdin="")
        self.assertEqual(code, 0)
        self.assertIn(">", output)

    def test_missing_dictionary_fails(self) -> None:
        out = io.StringIO()
        with self.assertLogs("muttum.cli", level="ERROR") as logs:
            code = main(["--dictionary", str(self.path) + ".missing"], stdin=io.StringIO(""), stdout=out)
        self.assertEqual(code, 1)
        self.assertEqual(len(logs.records), 1)
        self.assertIn("Unable to start a game", logs.output[0])
        self.assertEqual(out.getvalue(), "")

    def test_invalid_lengths_fail(self) -> None:
        code, _ = self.run_cli("--min-length", "7", "--max-length", "5", stdin="")
        self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
