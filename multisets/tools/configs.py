from dataclasses import dataclass, field
from typing import Literal


@dataclass
class CountConfig:
    mode: Literal["chars", "words", "lines"] = "words"
    ignore_case: bool = False

    # elements counted fewer times are not reported
    min_count: int = 1

    exclude: list[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    format: Literal["table", "csv"] = "table"
    limit: int | None = None


@dataclass
class ToolConfig:
    count: CountConfig = field(default_factory=CountConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
