import json
import os
import tempfile
import unittest

from tetris_storage import HighScore, HighScoreStore, JsonFileStore, MemoryStore


class JsonFileStoreTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "nested", "scores.json")

    def tearDown(self):
        self.tmp.cleanup()

    def test_missing_file_reads_as_empty(self):
        self.assertIsNone(JsonFileStore(self.path).get("high_score"))

    def test_set_creates_file_and_keeps_other_keys(self):
        store = JsonFileStore(self.path)
        store.set("high_score", "120")
        store.set("high_score_name", "Ada")
        with open(self.path, encoding="utf-8") as fh:
            self.assertEqual(json.load(fh), {"high_score": "120", "high_score_name": "Ada"})
        self.assertEqual(store.get("high_score"), "120")

    def test_corrupt_file_raises(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write("{not json")
        with self.assertRaises(ValueError):
            JsonFileStore(self.path).get("high_score")


class HighScoreStoreTests(unittest.TestCase):
    def test_load_defaults(self):
        self.assertEqual(HighScoreStore(MemoryStore()).load(), HighScore(0, None, None))

    def test_load_values(self):
        store = MemoryStore({"high_score": "900", "high_score_name": "Bo", "high_score_country": "SE"})
        self.assertEqual(HighScoreStore(store).load(), HighScore(900, "Bo", "SE"))

    def test_malformed_score_is_ignored(self):
        store = MemoryStore({"high_score": "lots"})
        with self.assertLogs("tetris_storage", level="WARNING"):
            self.assertEqual(HighScoreStore(store).load().score, 0)

    def test_save_holder_trims_and_defaults(self):
        mem = MemoryStore()
        records = HighScoreStore(mem)
        self.assertEqual(records.save_holder("  ", "  "), ("Anonymous", None))
        self.assertEqual(mem.data, {"high_score_name": "Anonymous", "high_score_country": ""})

    def test_corrupt_json_file_is_swallowed(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "scores.json")
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("[1, 2]")
            records = HighScoreStore(JsonFileStore(path))
            with self.assertLogs("tetris_storage", level="WARNING"):
                self.assertEqual(records.load(), HighScore())
                self.assertFalse(records.save_score(10))


if __name__ == "__main__":
    unittest.main()
