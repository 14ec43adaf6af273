"""Data models for procview."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# Color token -> concrete color (Catppuccin Mocha)
PALETTE: MappingProxyType[str, str] = MappingProxyType(
    {
        "green": "#a6e3a1",
        "blue": "#89b4fa",
        "overlay0": "#6c7086",
    }
)


class Severity(str, Enum):
    """Severity tags for usage percentages, lowest first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class ProcessStatus:
    """UI presentation of a process status category."""

    label: str
    emoji: str
    color: str  # palette token, e.g. 'green'


@dataclass(slots=True, frozen=True)
class StatusBadge:
    """A status badge ready to be shown by a UI layer."""

    label: str
    emoji: str
    color: str

    @property
    def style(self) -> str:
        """Get the Rich color for this badge's color token."""
        return PALETTE.get(self.color, self.color)

    @property
    def markup(self) -> str:
        """Render the badge as Rich console markup."""
        return f"[{self.style}]{self.emoji} {self.label}[/]"
