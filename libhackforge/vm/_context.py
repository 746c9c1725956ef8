from __future__ import annotations

from collections.abc import Callable, MutableSequence
from dataclasses import dataclass, field

from libhackforge.vm.config import TranslatorConfig


@dataclass(frozen=False)
class VMTranslationContext:
    """General context for emitting assembly from VM commands of one translation unit.

    Owns label counter, so comparison labels are unique within one translator run.
    """

    # Base name of translation unit, namespace for static variables
    file_name: str

    config: TranslatorConfig = field(default_factory=TranslatorConfig)
    on_warning: Callable[[str], None] | None = None

    buffer: MutableSequence[str] = field(default_factory=list[str])
    label_counter: int = 0

    finalized: bool = False

    def write(self, *lines: str) -> None:
        self.buffer.extend(lines)

    def label(self, label: str) -> None:
        """Emit label definition."""
        self.buffer.append(f"({label})")

    def comment(self, line: str) -> None:
        if not self.config.emit_comments:
            return
        self.buffer.append(f"// {line}")

    def warning(self, message: str) -> None:
        if self.on_warning:
            self.on_warning(message)

    def next_label_prefix(self) -> str:
        """Mint new unique prefix for an block of labels."""
        prefix = f"{self.config.comparison_label_prefix}.{self.label_counter}"
        self.label_counter += 1
        return prefix

    def static_symbol(self, offset: int) -> str:
        return f"{self.file_name}.{offset}"

    def flush(self) -> list[str]:
        """Take buffered lines, leaving buffer empty."""
        lines = list(self.buffer)
        self.buffer.clear()
        return lines
