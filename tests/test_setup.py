from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from kubectl_guard.config.models import GuardConfig
from kubectl_guard.config.setup import run_setup
from kubectl_guard.config.store import ConfigStore
from kubectl_guard.errors import ConfigIOError
from kubectl_guard.ui.checklist import MultiSelectItem


def _select(*chosen: str):
    def select(items: list[MultiSelectItem]) -> tuple[list[MultiSelectItem], bool]:
        return [MultiSelectItem(item.name, item.name in chosen) for item in items], True

    return select


class RunSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "config.json"
        self.store = ConfigStore(self.path)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_saves_selected_contexts(self) -> None:
        with patch("kubectl_guard.config.setup.click.echo"), patch("kubectl_guard.ui.prompt.click.secho"):
            done = run_setup(self.store, ["prod", "staging", "dev"], select=_select("prod", "staging"))

        self.assertTrue(done)
        self.assertEqual(self.store.load().protected_contexts, ["prod", "staging"])

    def test_empty_selection_still_writes_config(self) -> None:
        with patch("kubectl_guard.config.setup.click.echo"), patch("kubectl_guard.ui.prompt.click.echo"):
            done = run_setup(self.store, ["dev"], select=_select())

        self.assertTrue(done)
        self.assertEqual(self.store.load(), GuardConfig())

    def test_cancel_writes_nothing(self) -> None:
        with patch("kubectl_guard.config.setup.click.echo") as echo_mock:
            done = run_setup(self.store, ["prod"], select=lambda items: ([], False))

        self.assertFalse(done)
        self.assertFalse(self.store.exists())
        echo_mock.assert_called_with("Setup cancelled.")

    def test_no_contexts(self) -> None:
        select = MagicMock()
        with patch("kubectl_guard.ui.prompt.click.secho"), patch("kubectl_guard.ui.prompt.click.echo"):
            done = run_setup(self.store, [], select=select)

        self.assertFalse(done)
        select.assert_not_called()
        self.assertFalse(self.store.exists())

    def test_save_failure(self) -> None:
        store = MagicMock(spec=ConfigStore)
        store.save.side_effect = ConfigIOError(self.path, "Permission denied")
        with patch("kubectl_guard.ui.prompt.click.secho") as secho_mock:
            done = run_setup(store, ["prod"], select=_select("prod"))

        self.assertFalse(done)
        self.assertIn("Permission denied", secho_mock.call_args.args[0])


if __name__ == "__main__":
    unittest.main()
