"""Textual widgets that display formatted metrics."""

from textual.widgets import Static

from procview.formatting import format_percentage, format_status, usage_class
from procview.models import Severity


class StatusBadgeLabel(Static):
    """Label showing a process status as a colored badge."""

    DEFAULT_CSS = """
    StatusBadgeLabel {
        width: auto;
        padding: 0 1;
    }
    """

    def __init__(self, status: str = "Unknown", **kwargs) -> None:
        """
        Initialize StatusBadgeLabel.

        Args:
            status: Process status key, e.g. 'Running'.
        """
        super().__init__(format_status(status).markup, **kwargs)
        self._status = status

    @property
    def status(self) -> str:
        """Get the current status key."""
        return self._status

    def set_status(self, status: str) -> None:
        """Show a new status."""
        self._status = status
        self.update(format_status(status).markup)


class UsageLabel(Static):
    """Percentage label carrying its severity as a CSS class."""

    DEFAULT_CSS = """
    UsageLabel {
        width: auto;
    }

    UsageLabel.low {
        color: $success;
    }

    UsageLabel.medium {
        color: $text;
    }

    UsageLabel.high {
        color: $warning;
    }

    UsageLabel.critical {
        color: $error;
        text-style: bold;
    }
    """

    def __init__(self, value: float = 0.0, *, classes: str | None = None, **kwargs) -> None:
        """
        Initialize UsageLabel.

        Args:
            value: Usage percentage to show.
            classes: Extra CSS classes, added to the severity class.
        """
        severity = usage_class(value).value
        classes = f"{classes} {severity}" if classes else severity
        super().__init__(format_percentage(value), classes=classes, **kwargs)
        self._value = value

    @property
    def value(self) -> float:
        """Get the current usage percentage."""
        return self._value

    @property
    def severity(self) -> Severity:
        """Get the severity of the current usage."""
        return usage_class(self._value)

    def set_usage(self, value: float) -> None:
        """Show a new usage percentage and move to its severity class."""
        self._value = value
        severity = usage_class(value)
        for tag in Severity:
            self.set_class(tag is severity, tag.value)
        self.update(format_percentage(value))
