"""
Exception classes for gridmaze with helpful error messages and user guidance.

Three kinds of failure are distinguished:

- Configuration errors: bad dimensions, unknown algorithm names, grids a
  generator cannot work on, malformed maze files. Detected at the boundary,
  never leave a half-built grid behind.
- Invariant violations: internal logic faults detected during generation.
  Not recoverable by retrying.
- Partial input: a truncated maze file. Reported as a warning, the caller
  still gets a best-effort grid.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze errors with helpful context and suggestions.

    The formatted message carries:
    - Clear error description
    - The generator (or component) that raised it
    - Suggested action for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        generator_name: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.generator_name = generator_name or "gridmaze"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.generator_name}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class ConfigurationError(MazeError, ValueError):
    """Exception raised when a maze, generator or file is configured wrongly."""

    def __init__(
        self,
        message: str,
        generator_name: str | None = None,
        suggested_action: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
        error_code: str = "INVALID_CONFIGURATION",
    ):
        super().__init__(
            message=message,
            generator_name=generator_name,
            suggested_action=suggested_action,
            error_code=error_code,
            diagnostic_data=diagnostic_data,
        )


class MazeFormatError(ConfigurationError):
    """Exception raised when a maze file has a bad magic number or header."""

    def __init__(self, message: str, diagnostic_data: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            generator_name="maze_file",
            suggested_action="Check that the file was written by gridmaze and is not corrupted",
            diagnostic_data=diagnostic_data,
            error_code="INVALID_MAZE_FILE",
        )


class MazeInvariantError(MazeError, RuntimeError):
    """
    Exception raised when a generator detects an internal inconsistency.

    ``cells`` holds the (x, y) coordinates that were found inconsistent.
    """

    def __init__(
        self,
        message: str,
        cells: list[tuple[int, int]],
        generator_name: str | None = None,
    ):
        self.cells = list(cells)
        shown = ", ".join(f"{x},{y}" for x, y in self.cells[:20])
        if len(self.cells) > 20:
            shown += f", ... ({len(self.cells) - 20} more)"

        super().__init__(
            message=message,
            generator_name=generator_name,
            suggested_action="Check that every live cell is reachable from every other through grid adjacency",
            error_code="INVARIANT_VIOLATION",
            diagnostic_data={"inconsistent_cells": shown, "inconsistent_count": len(self.cells)},
        )


class TruncatedMazeWarning(UserWarning):
    """Warning emitted when a maze file holds fewer cells than its header announces."""


def validate_dimensions(width: Any, height: Any, generator_name: str | None = None) -> None:
    """Validate that grid dimensions are positive integers."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"Grid {name} must be an integer",
                generator_name=generator_name,
                suggested_action=f"Convert {name} to int",
                diagnostic_data={"parameter": name, "provided_value": repr(value)},
            )
        if value < 1:
            raise ConfigurationError(
                f"Grid {name} must be at least 1",
                generator_name=generator_name,
                suggested_action=f"Increase {name} to at least 1",
                diagnostic_data={"parameter": name, "provided_value": value},
            )
