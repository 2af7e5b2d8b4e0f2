import unittest

from muttum import collation_key, normalize


class NormalizerTests(unittest.TestCase):
    def test_strips_accents_and_case(self) -> None:
        self.assertEqual(normalize("Élan"), "elan")
        self.assertEqual(normalize("elan"), "elan")
        self.assertEqual(normalize("CHÂTEAU"), "chateau")
        self.assertEqual(normalize("Noël"), "noel")

    def test_collation_keys_ignore_case_and_accents(self) -> None:
        self.assertEqual(collation_key("Élan"), collation_key("elan"))
        self.assertEqual(collation_key("FORÊT"), collation_key("foret"))
        self.assertNotEqual(collation_key("forêt"), collation_key("forte"))

    def test_collation_keys_are_ordered_bytes(self) -> None:
        key = collation_key("abeille")
        self.assertIsInstance(key, bytes)
        self.assertLess(collation_key("abeille"), collation_key("zèbre"))

    def test_normalize_is_idempotent(self) -> None:
        for word in ["Élan", "cœur", "aujourd'hui", "ÅNGSTRÖM", "", "straße", "ﬁn"]:
            once = normalize(word)
            self.assertEqual(normalize(once), once)

    def test_ligatures_are_spelled_out(self) -> None:
        self.assertEqual(normalize("Cœur"), "coeur")
        self.assertEqual(normalize("ŒUVRE"), "oeuvre")
        self.assertEqual(normalize("ex-æquo"), "ex-aequo")
        self.assertEqual(collation_key("cœurs"), collation_key("COEURS"))

    def test_characters_without_decomposition_pass_through(self) -> None:
        self.assertEqual(normalize("a-b'c"), "a-b'c")
        self.assertEqual(normalize("ı"), "ı")


if __name__ == "__main__":
    unittest.main()
