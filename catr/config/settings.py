# catr/config/settings.py
# Run configuration for catr: source tokens & numbering flags, validated on construction

from dataclasses import dataclass, field
from typing import List

from ..core.constants import STDIN_TOKEN
from ..core.numbering import NumberingMode, select_mode


# * Validated run configuration delivered by the CLI layer to the driver
@dataclass
class CatSettings:
    files: List[str] = field(default_factory=lambda: [STDIN_TOKEN])
    number_lines: bool = False
    number_nonblank_lines: bool = False

    def __post_init__(self) -> None:
        # Validate settings values after initialization.
        if not isinstance(self.files, list):
            raise ValueError(
                f"files must be a list of source tokens, got {type(self.files).__name__}"
            )
        if not self.files:
            raise ValueError("files must contain at least one source token")
        for token in self.files:
            if not isinstance(token, str) or not token:
                raise ValueError(f"source tokens must be non-empty strings, got {token!r}")

        # strict bool validation (no coercion)
        if not isinstance(self.number_lines, bool):
            raise ValueError(
                f"number_lines must be a boolean (true/false), "
                f"got {type(self.number_lines).__name__}"
            )
        if not isinstance(self.number_nonblank_lines, bool):
            raise ValueError(
                f"number_nonblank_lines must be a boolean (true/false), "
                f"got {type(self.number_nonblank_lines).__name__}"
            )

    # fresh numbering mode for one source (counter starts at 1 every call)
    def initial_mode(self) -> NumberingMode:
        return select_mode(self.number_lines, self.number_nonblank_lines)
