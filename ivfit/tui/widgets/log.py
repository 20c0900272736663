"""Log Widget - Scrollable event log for fit events."""

import sys
from datetime import datetime
from textual.widgets import RichLog

# Symbol definitions
def get_symbol(name: str, force_unicode: bool = False) -> str:
    """Get symbol based on platform and force_unicode flag."""
    is_windows = sys.platform == "win32"
    use_unicode = not is_windows or force_unicode

    symbols = {
        "check": ("✓", "[OK]"),
        "warn":  ("⚠", "[!]"),
        "info":  ("ℹ", "[i]"),
    }

    uni, ascii_ = symbols.get(name, ("?", "?"))
    return uni if use_unicode else ascii_


class LogWidget(RichLog):
    """A scrollable log widget for displaying what the screen computed."""

    def __init__(
        self,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
        max_lines: int = 100,
    ) -> None:
        super().__init__(
            name=name,
            id=id,
            classes=classes,
            disabled=disabled,
            max_lines=max_lines,
            highlight=True,
            markup=True,
        )
        self.can_focus = False
        self._entries: list[str] = []

    @property
    def entries(self) -> list[str]:
        """Plain messages logged so far, oldest first."""
        return list(self._entries)

    def log_event(self, message: str, style: str = "") -> None:
        """Log an event with timestamp.

        Args:
            message: The message to log.
            style: Optional Rich style for the message.
        """
        self._entries.append(message)
        timestamp = datetime.now().strftime("%H:%M:%S")
        if style:
            formatted = f"[dim]{timestamp}[/dim] [{style}]{message}[/{style}]"
        else:
            formatted = f"[dim]{timestamp}[/dim] {message}"
        self.write(formatted)

    def log_error(self, message: str) -> None:
        """Log an error message."""
        sym = get_symbol("warn", getattr(self.app, "force_unicode", False))
        self.log_event(f"{sym} {message}", "bold red")

    def log_warning(self, message: str) -> None:
        """Log a warning message."""
        sym = get_symbol("warn", getattr(self.app, "force_unicode", False))
        self.log_event(f"{sym} {message}", "yellow")

    def log_info(self, message: str) -> None:
        """Log an informational message."""
        sym = get_symbol("info", getattr(self.app, "force_unicode", False))
        self.log_event(f"{sym} {message}", "cyan")

    def log_success(self, message: str) -> None:
        """Log a success message."""
        sym = get_symbol("check", getattr(self.app, "force_unicode", False))
        self.log_event(f"{sym} {message}", "bold green")
