from dataclasses import dataclass, field


@dataclass(frozen=True)
class TranslatorConfig:
    """Configuration for VM translator.

    Low-level configuration specifies how to generate assembly from VM commands
    """

    # Emits source VM command as an comment before its assembly
    emit_comments: bool = field(default=False)

    # Treat commands that are not known at all as errors instead of skipping them
    strict: bool = field(default=False)

    # Append an infinite loop `({file}$END)` at the end of translation unit,
    # so program never runs past its last instruction
    emit_end_loop: bool = field(default=False)

    # Labels of comparison blocks are `{prefix}.{counter}.start` / `{prefix}.{counter}.end`
    comparison_label_prefix: str = field(default="LABEL")

    # First address of the `temp` segment
    # Platform convention places it at R5, this toolchain historically uses 4 (`THAT` overlaps `temp 0`)
    temp_segment_base: int = field(default=4)

    # First address of the `pointer` segment (`pointer 0` is THIS, `pointer 1` is THAT)
    pointer_segment_base: int = field(default=3)
