"""Data model for a classified path."""

import dataclasses
from dataclasses import dataclass

from kernelpath.code_units import SEPARATOR
from kernelpath.root_kind import Namespace, RelativeForm, Root, RootKind


@dataclass(frozen=True)
class ParsedPath:
    """A path split into its root and components."""

    namespace: Namespace
    root: Root
    components: tuple[str, ...]
    is_absolute: bool
    trailing_separator: bool = False  # final component names a directory
    # Legacy device matches are only valid if this directory exists.
    deferred_parent: str | None = None

    def __post_init__(self) -> None:
        """Check the structural invariants."""
        if self.namespace is not self.root.namespace:
            msg = f"{self.root.kind.value} roots belong to the {self.root.namespace.value} namespace"
            raise ValueError(msg)
        if self.is_absolute == (self.root.kind is RootKind.RELATIVE):
            msg = "is_absolute must be set exactly when the root is not relative"
            raise ValueError(msg)
        for component in self.components:
            if SEPARATOR in component:
                msg = f"Component contains a separator: {component!r}"
                raise ValueError(msg)

    @property
    def relative_form(self) -> RelativeForm | None:
        """Return the relative form, or None for absolute paths."""
        return self.root.relative_form

    def with_components(self, components: tuple[str, ...] | list[str]) -> "ParsedPath":
        """Return a copy with the components replaced."""
        return dataclasses.replace(self, components=tuple(components))
