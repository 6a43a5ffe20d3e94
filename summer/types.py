from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import SummerUserError


@dataclass(frozen=True)
class Caret:
    """
    Caret position: either a 1-based line/column pair or a character offset.
    """
    line: Optional[int] = None
    column: Optional[int] = None
    offset: Optional[int] = None

    @staticmethod
    def parse(spec: str) -> Caret:
        """Parse ``LINE:COL``."""
        parts = spec.split(":")
        if len(parts) != 2 or not all(p.strip().isdigit() for p in parts):
            raise SummerUserError(f"Invalid caret '{spec}'. Expected 'LINE:COL'")
        return Caret(line=int(parts[0]), column=int(parts[1]))


@dataclass(frozen=True)
class RunOptions:
    # Explicit config file (--config); summer.yaml in cwd otherwise
    config_path: Optional[Path] = None
    # Restrict to one intention by name (--intention)
    intention: Optional[str] = None
    # Compute the result without writing the file back
    dry_run: bool = False


__all__ = ["Caret", "RunOptions"]
