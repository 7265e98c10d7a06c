"""A sink that renders lines on a terminal through rich."""

from rich.console import Console
from rich.text import Text

from .flags import Level

LEVEL_STYLES = {
    Level.INFO.value: "cyan",
    Level.DEBUG.value: "dim",
    Level.ERROR.value: "bold red",
    Level.FATAL.value: "bold red",
}


def styled_line(line: str) -> Text:
    """Style the level tag at the start of ``line``; the rest stays plain."""
    text = Text(line)
    for tag, style in LEVEL_STYLES.items():
        if line.startswith(tag):
            text.stylize(style, 0, len(tag))
            break
    return text


class ConsoleSink:
    """Logger sink writing through a rich Console (stderr by default).

    Lines are wrapped in Text objects, so brackets in messages are never
    read as console markup.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def write(self, data: bytes) -> int:
        line = data.decode("utf-8", errors="replace")
        self.console.print(styled_line(line), end="", soft_wrap=True, highlight=False)
        return len(data)

    def flush(self) -> None:
        self.console.file.flush()
