from __future__ import annotations

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from kubectl_guard.config.models import GuardConfig
from kubectl_guard.config.store import ConfigStore
from kubectl_guard.errors import ConfigIOError
from kubectl_guard.paths import config_path


class GuardConfigTests(unittest.TestCase):
    def test_add_context_is_idempotent(self) -> None:
        config = GuardConfig(protected_contexts=["existing"])

        self.assertTrue(config.add_context("new-context"))
        self.assertEqual(config.protected_contexts, ["existing", "new-context"])

        self.assertFalse(config.add_context("new-context"))
        self.assertEqual(config.protected_contexts, ["existing", "new-context"])

    def test_remove_context(self) -> None:
        config = GuardConfig(protected_contexts=["first", "second", "third"])

        self.assertTrue(config.remove_context("second"))
        self.assertEqual(config.protected_contexts, ["first", "third"])

        self.assertFalse(config.remove_context("nonexistent"))
        self.assertEqual(config.protected_contexts, ["first", "third"])

    def test_blank_patterns_are_dropped(self) -> None:
        config = GuardConfig(protected_contexts=[" prod-* ", "", "   "])
        self.assertEqual(config.protected_contexts, ["prod-*"])

    def test_duplicate_patterns_are_collapsed_in_order(self) -> None:
        config = GuardConfig(protected_contexts=["prod", "dev", " prod", "dev ", "qa"])
        self.assertEqual(config.protected_contexts, ["prod", "dev", "qa"])

    def test_add_and_remove_strip_whitespace(self) -> None:
        config = GuardConfig(protected_contexts=["prod"])

        self.assertFalse(config.add_context(" prod "))
        self.assertEqual(config.protected_contexts, ["prod"])

        self.assertTrue(config.add_context("  staging\t"))
        self.assertEqual(config.protected_contexts, ["prod", "staging"])

        self.assertTrue(config.remove_context(" prod"))
        self.assertEqual(config.protected_contexts, ["staging"])

    def test_blank_pattern_is_rejected(self) -> None:
        config = GuardConfig(protected_contexts=["prod"])
        for pattern in ("", "   "):
            with self.subTest(pattern=pattern):
                with self.assertRaises(ValueError):
                    config.add_context(pattern)
                self.assertFalse(config.remove_context(pattern))
        self.assertEqual(config.protected_contexts, ["prod"])

    def test_is_context_protected(self) -> None:
        config = GuardConfig(protected_contexts=["prod-*", "production"])
        self.assertTrue(config.is_context_protected("prod-eu"))
        self.assertTrue(config.is_context_protected("production"))
        self.assertFalse(config.is_context_protected("staging"))


class ConfigStoreTests(unittest.TestCase):
    def test_save_and_load_roundtrip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.json"
            store = ConfigStore(path)
            self.assertFalse(store.exists())

            store.save(GuardConfig(protected_contexts=["prod-cluster", "prod-*"]))
            self.assertTrue(store.exists())

            loaded = store.load()
            self.assertEqual(loaded.protected_contexts, ["prod-cluster", "prod-*"])

            payload = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual(payload["schema_version"], 1)
            self.assertTrue(path.read_text(encoding="utf-8").endswith("\n"))

    def test_empty_file_loads_as_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("\n", encoding="utf-8")
            self.assertEqual(ConfigStore(path).load().protected_contexts, [])

    def test_corrupt_file_raises_and_is_left_alone(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")

            with self.assertRaises(ConfigIOError) as caught:
                ConfigStore(path).load()

            self.assertEqual(caught.exception.path, path)
            self.assertEqual(path.read_text(encoding="utf-8"), "{not json")

    def test_invalid_schema_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"protected_contexts": "prod-*"}), encoding="utf-8")
            with self.assertRaises(ConfigIOError):
                ConfigStore(path).load()

    def test_unreadable_path_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ConfigIOError):
                ConfigStore(Path(tmp)).load()

    def test_load_or_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = ConfigStore(Path(tmp) / "config.json")
            self.assertEqual(store.load_or_default(), GuardConfig())
            self.assertFalse(store.exists())


class ConfigPathTests(unittest.TestCase):
    def test_default_path(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("KUBECTL_GUARD_CONFIG", None)
            path = config_path()
        self.assertTrue(path.is_absolute())
        self.assertEqual(path.name, "config.json")

    def test_environment_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "guard.json"
            with patch.dict(os.environ, {"KUBECTL_GUARD_CONFIG": str(target)}):
                self.assertEqual(config_path(), target.resolve())
                self.assertEqual(ConfigStore().path, target.resolve())


if __name__ == "__main__":
    unittest.main()
