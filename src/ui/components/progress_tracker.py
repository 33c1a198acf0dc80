"""Progress tracker component for row-by-row imports."""
from nicegui import ui


class ProgressTracker:
    """Displays a progress bar with status text while an import runs."""

    def __init__(self, total: int = 0, label: str = "Importing..."):
        self.total = total
        self.current = 0
        self._container = ui.column().classes("w-full gap-2")
        with self._container:
            self._label = ui.label(label).classes("text-body2")
            self._progress = ui.linear_progress(value=0, show_value=False).classes("w-full")

    def update(self, current: int, total: int | None = None):
        """Move the bar to row *current* of *total*."""
        if total is not None:
            self.total = total
        self.current = current
        fraction = current / self.total if self.total > 0 else 0
        self._progress.set_value(fraction)
        self._label.set_text(f"Importing row {current} / {self.total}")

    def complete(self, message: str = "Done!"):
        self._progress.set_value(1.0)
        self._label.set_text(message)

    def set_error(self, message: str):
        self._label.set_text(message)
        self._label.classes(add="text-negative")
