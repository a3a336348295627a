"""Ordered module set value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class ModuleSet:
    """Set of platform module names with stable first-insertion order.

    The linker receives the set serialized as a comma-joined list, so the
    order must be reproducible within one run. Membership has set semantics.

    Attributes:
        names: Module names, unique, in first-insertion order.
    """

    names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"names must be unique, got {self.names}")
        for name in self.names:
            if not name or name != name.strip():
                raise ValueError(f"module name must be non-empty and trimmed, got {name!r}")

    @classmethod
    def of(cls, *names: str) -> ModuleSet:
        """Create set from names, dropping later duplicates."""
        return cls(tuple(dict.fromkeys(names)))

    @classmethod
    def parse(cls, line: str) -> ModuleSet:
        """Parse a comma-separated module list.

        Tokens are trimmed, empty tokens dropped, duplicates collapsed.

        Args:
            line: Analyzer output, e.g. "java.base,java.sql\\n"

        Returns:
            ModuleSet in token order
        """
        tokens = (token.strip() for token in line.strip().split(","))
        return cls.of(*(token for token in tokens if token))

    def union(self, other: Iterable[str]) -> ModuleSet:
        """Return self followed by names of other not already present."""
        return ModuleSet.of(*self.names, *other)

    def with_module(self, name: str) -> ModuleSet:
        """Return set with name appended (no-op if present)."""
        return self.union((name,))

    def to_argument(self) -> str:
        """Serialize as the linker's --add-modules value."""
        return ",".join(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)
