"""Configuration models for error diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class DiagnosticOptions:
    """Rendering options for cause-chain diagnostics."""

    max_depth: int = 8
    include_type_names: bool = True
    follow_context: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1.")
