from dataclasses import dataclass, field


@dataclass(frozen=True)
class AssemblerConfig:
    """Configuration for assembler.

    Specifies how assembler treats input that is not strictly an error
    """

    # Treat lines that match no instruction grammar as errors instead of skipping them
    strict: bool = field(default=False)
