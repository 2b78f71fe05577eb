# SPDX-FileCopyrightText: 2026 clitree contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ls flow: cache reuse, staleness rebuilds and persistence."""

import json
import unittest

from clitree.lib.structure.cache import CacheStore
from clitree.lib.structure.listing import DEFAULT_OPTIONS, ListCommands, ListOptions
from clitree.lib.structure.registry import StructureRegistry
from test_utils import FakeHelpProvider, clitree_env, commander_help, deploy_tree_texts


class TestListOptions(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(
            DEFAULT_OPTIONS,
            ListOptions(include_help=False, indent=4, use_color=True, prefix="- [ ] ", skip_cache=False),
        )

    def test_merged_ignores_none(self) -> None:
        merged = DEFAULT_OPTIONS.merged(indent=2, prefix=None, use_color=False)
        self.assertEqual(merged.indent, 2)
        self.assertEqual(merged.prefix, "- [ ] ")
        self.assertFalse(merged.use_color)

    def test_merged_rejects_unknown(self) -> None:
        with self.assertRaises(TypeError):
            DEFAULT_OPTIONS.merged(colour=False)


class ListCommandsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._env = clitree_env()
        self.env = self._env.__enter__()
        self.addCleanup(self._env.__exit__, None, None, None)
        self.infos: list[str] = []
        self.errors: list[str] = []
        self.successes: list[str] = []
        self.output: list[str] = []
        self.store = CacheStore(
            self.env.cache_file, on_info=self.infos.append, on_error=self.errors.append
        )

    def _run(self, root_names, provider, **options) -> ListCommands:
        listing = ListCommands(
            root_names,
            provider,
            self.store,
            DEFAULT_OPTIONS.merged(use_color=False, **options),
            write=self.output.append,
            on_info=self.infos.append,
            on_success=self.successes.append,
        )
        listing.run()
        return listing


class TestListCommands(ListCommandsTestCase):
    def test_first_run_discovers_renders_and_saves(self) -> None:
        provider = FakeHelpProvider(deploy_tree_texts())

        listing = self._run(["deploy", "copy"], provider)

        self.assertTrue(listing.rebuilt)
        self.assertIn("No cached file found, building from scratch.", self.infos)
        self.assertEqual(
            self.output,
            [
                "- [ ] deploy",
                "        - [ ] aws-beanstalk",
                "                - [ ] test",
                "            - [ ] --dry-run",
                "        - [ ] aws-s3",
                "            - [ ] -b, --bucket <bucket>",
                "            - [ ] --public-url <url>",
                "- [ ] copy",
                "    - [ ] -d, --destination <dir>",
                "    - [ ] -f, --flags <flags>",
            ],
        )
        records = json.loads(self.env.cache_file.read_text(encoding="utf-8"))
        self.assertEqual(len(records), 5)
        self.assertEqual(self.successes, ["Cached file successfully updated."])

    def test_fresh_cache_skips_discovery_and_saving(self) -> None:
        self._run(["deploy", "copy"], FakeHelpProvider(deploy_tree_texts()))
        mtime = self.env.cache_file.stat().st_mtime_ns
        self.output.clear()
        self.successes.clear()

        provider = FakeHelpProvider({})
        listing = self._run(["deploy", "copy"], provider)

        self.assertFalse(listing.rebuilt)
        self.assertEqual(provider.calls, [])
        self.assertEqual(self.output[0], "- [ ] deploy")
        self.assertEqual(len(self.output), 10)
        self.assertEqual(self.successes, [])
        self.assertEqual(self.env.cache_file.stat().st_mtime_ns, mtime)

    def test_changed_catalog_rebuilds(self) -> None:
        self._run(["deploy", "copy"], FakeHelpProvider(deploy_tree_texts()))
        self.infos.clear()

        texts = deploy_tree_texts()
        texts["webpack"] = commander_help("tool webpack")
        provider = FakeHelpProvider(texts)
        listing = self._run(["deploy", "copy", "webpack"], provider)

        self.assertTrue(listing.rebuilt)
        self.assertIn(
            "Detected changes in parent commands that are not yet saved to the cache file - rebuilding.",
            self.infos,
        )
        self.assertIn("webpack", provider.calls)
        cached = StructureRegistry.from_records(
            json.loads(self.env.cache_file.read_text(encoding="utf-8"))
        )
        self.assertEqual(set(cached.root_names()), {"deploy", "copy", "webpack"})

    def test_skip_cache_forces_rebuild(self) -> None:
        self._run(["deploy"], FakeHelpProvider(deploy_tree_texts()))
        self.infos.clear()

        provider = FakeHelpProvider(deploy_tree_texts())
        listing = self._run(["deploy"], provider, skip_cache=True)

        self.assertTrue(listing.rebuilt)
        self.assertEqual(self.infos[0], "Skipping cache if it exists...")
        self.assertNotIn(
            "Detected changes in parent commands that are not yet saved to the cache file - rebuilding.",
            self.infos,
        )
        self.assertEqual(provider.calls[0], "deploy")

    def test_corrupt_cache_rebuilds(self) -> None:
        self.env.cache_file.parent.mkdir(parents=True)
        self.env.cache_file.write_text("[{", encoding="utf-8")

        listing = self._run(["copy"], FakeHelpProvider(deploy_tree_texts()))

        self.assertTrue(listing.rebuilt)
        self.assertEqual(len(self.errors), 1)
        self.assertEqual(self.output, ["- [ ] copy", "    - [ ] -d, --destination <dir>", "    - [ ] -f, --flags <flags>"])

    def test_include_help_and_indent(self) -> None:
        provider = FakeHelpProvider(
            {
                "deploy": commander_help("and-cli deploy", commands=["aws-s3"]),
                "deploy aws-s3": "",
            }
        )

        self._run(["deploy"], provider, include_help=True, indent=2, prefix="")

        self.assertEqual(self.output, ["deploy", "    aws-s3", "  -h, --help"])


if __name__ == "__main__":
    unittest.main()
