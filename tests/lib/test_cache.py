# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the JSON command cache and root-set staleness."""

import json
import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from clitree.lib.structure.cache import CacheStore, is_stale, root_differences
from clitree.lib.structure.registry import StructureRegistry
from test_utils import clitree_env


def _sample_registry() -> StructureRegistry:
    registry = StructureRegistry()
    registry.upsert("deploy aws-s3", ["-b, --bucket <bucket>"])
    registry.upsert("deploy", [])
    registry.upsert("copy", ["-d, --destination <dir>"])
    return registry


class TestCacheStore(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.addCleanup(self._td.cleanup)
        self.path = Path(self._td.name) / "nested" / "commands.json"
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.store = CacheStore(self.path, on_info=self.infos.append, on_error=self.errors.append)
        env = unittest.mock.patch.dict(
            os.environ, {"CLITREE_STATE_DIR": str(Path(self._td.name) / "state")}
        )
        env.start()
        self.addCleanup(env.stop)

    def test_missing_file_is_no_cache(self) -> None:
        self.assertIsNone(self.store.load())
        self.assertEqual(self.infos, ["No cached file found, building from scratch."])
        self.assertEqual(self.errors, [])

    def test_save_then_load_round_trip(self) -> None:
        original = _sample_registry()
        self.assertTrue(self.store.save(original))

        loaded = self.store.load()
        self.assertIsNotNone(loaded)
        self.assertEqual(set(loaded.root_names()), set(original.root_names()))
        self.assertEqual(list(loaded), list(original))

    def test_saved_file_is_pretty_printed_records(self) -> None:
        self.store.save(_sample_registry())
        text = self.path.read_text(encoding="utf-8")
        self.assertIn('\n    {\n        "command": "aws-s3"', text)
        self.assertEqual(
            json.loads(text)[0],
            {"command": "aws-s3", "options": ["-b, --bucket <bucket>"], "parent": "deploy"},
        )

    def test_corrupt_json_is_no_cache(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        self.assertIsNone(self.store.load())
        self.assertEqual(len(self.errors), 1)
        self.assertIn(str(self.path), self.errors[0])

    def test_wrong_shape_is_no_cache(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({"command": "deploy"}), encoding="utf-8")
        self.assertIsNone(self.store.load())
        self.assertEqual(len(self.errors), 1)

    def test_write_failure_is_reported_not_raised(self) -> None:
        # A regular file where the parent directory should be
        blocker = Path(self._td.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = CacheStore(blocker / "commands.json", on_error=self.errors.append)

        self.assertFalse(store.save(_sample_registry()))
        self.assertEqual(len(self.errors), 1)
        self.assertIn("There was an error writing to", self.errors[0])

    def test_default_path_under_config_root(self) -> None:
        with clitree_env() as env:
            self.assertEqual(CacheStore().path, env.cache_file)


class TestStaleness(unittest.TestCase):
    def test_same_roots_are_fresh(self) -> None:
        registry = _sample_registry()
        self.assertFalse(is_stale(registry, ["copy", "deploy"]))

    def test_differences_in_both_directions(self) -> None:
        registry = StructureRegistry()
        registry.upsert("a", [])
        registry.upsert("c", [])
        self.assertEqual(root_differences(registry, ["a", "b"]), ({"b"}, {"c"}))
        self.assertTrue(is_stale(registry, ["a", "b"]))

    def test_added_root_is_stale(self) -> None:
        self.assertTrue(is_stale(_sample_registry(), ["deploy", "copy", "webpack"]))

    def test_removed_root_is_stale(self) -> None:
        self.assertTrue(is_stale(_sample_registry(), ["deploy"]))

    def test_child_names_do_not_count_as_roots(self) -> None:
        self.assertTrue(is_stale(_sample_registry(), ["deploy", "copy", "aws-s3"]))


if __name__ == "__main__":
    unittest.main()
