"""Interactive context checklist used by the setup wizard."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, SelectionList, Static


@dataclass(slots=True)
class MultiSelectItem:
    name: str
    selected: bool = False


class ContextChecklistApp(App[list[MultiSelectItem] | None]):
    """Returns the items with their final selection, or None when cancelled."""

    TITLE = "kubectl-guard"

    BINDINGS = [
        Binding("enter", "confirm", "Confirm", priority=True),
        Binding("a", "toggle_all", "Toggle all"),
        Binding("n", "select_none", "None"),
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
        Binding("q", "cancel", "Quit"),
        Binding("escape", "cancel", "Quit", show=False),
        Binding("ctrl+c", "cancel", "Quit", show=False, priority=True),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }

    #title {
        color: $accent;
        padding: 0 1;
    }

    #instructions, #hints {
        padding: 0 1;
        color: $text-muted;
    }

    SelectionList {
        height: 1fr;
        border: round $primary;
    }
    """

    def __init__(self, items: list[MultiSelectItem]) -> None:
        self.items = items
        super().__init__()

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("[b]kubectl-guard: First-time Setup[/b]", id="title", markup=True)
            yield Static(
                "Select contexts to protect (space to toggle, enter to confirm):",
                id="instructions",
                markup=False,
            )
            yield SelectionList[str](
                *[(Text(item.name), item.name, item.selected) for item in self.items],
                id="contexts",
            )
            yield Static(
                "[n] None - don't protect any contexts\n[a] Toggle all",
                id="hints",
                markup=False,
            )
        yield Footer()

    def on_mount(self) -> None:
        selection_list = self._selection_list()
        selection_list.focus()
        if self.items:
            selection_list.highlighted = 0

    def _selection_list(self) -> SelectionList[str]:
        return self.query_one("#contexts", SelectionList)

    def _finish(self) -> None:
        chosen = set(self._selection_list().selected)
        self.exit([MultiSelectItem(name=item.name, selected=item.name in chosen) for item in self.items])

    def action_confirm(self) -> None:
        self._finish()

    def action_toggle_all(self) -> None:
        selection_list = self._selection_list()
        if len(selection_list.selected) == selection_list.option_count:
            selection_list.deselect_all()
        else:
            selection_list.select_all()

    def action_select_none(self) -> None:
        self._selection_list().deselect_all()
        self._finish()

    def action_cursor_down(self) -> None:
        self._selection_list().action_cursor_down()

    def action_cursor_up(self) -> None:
        self._selection_list().action_cursor_up()

    def action_cancel(self) -> None:
        self.exit(None)


def multi_select(items: list[MultiSelectItem]) -> tuple[list[MultiSelectItem], bool]:
    """Run the checklist; returns the items and whether the user confirmed."""
    result = ContextChecklistApp(items).run()
    if result is None:
        return [], False
    return result, True
