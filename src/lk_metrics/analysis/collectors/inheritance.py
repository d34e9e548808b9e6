"""Inheritance depth resolution over a flat declaration set.

Base types are matched purely by simple name against the analyzed corpus;
there is no type resolution. When several declarations share a name, the
first one in declaration order wins.

Example:
    interface IShape {}
    class Shape : IShape {}       // depth 1 (interface)
    class Circle : Shape {}       // depth 1 (= depth(Shape))
    class Ring : Circle, IShape {} // depth 1 (class match stops the scan)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from loguru import logger

from ...core.models import ClassDeclaration, InterfaceDeclaration

# Depth contributed by a directly implemented interface
INTERFACE_DEPTH = 1

D = TypeVar("D", ClassDeclaration, InterfaceDeclaration)


def _first_by_name(declarations: Iterable[D]) -> dict[str, D]:
    index: dict[str, D] = {}
    for declaration in declarations:
        index.setdefault(declaration.name, declaration)
    return index


@dataclass(frozen=True)
class InheritanceResolver:
    """Resolves inheritance depth against read-only class/interface collections.

    The resolver is an immutable context: it is built once per corpus and can
    be shared between any number of depth computations.

    Cyclic base references (``A : B``, ``B : A``, or ``A : A``) are cut at the
    point where a declaration reappears on the current resolution path. The
    reappearing class still counts as a class match, so scanning stops, but
    it contributes depth 0.
    """

    classes: tuple[ClassDeclaration, ...]
    interfaces: tuple[InterfaceDeclaration, ...]
    _class_index: dict[str, ClassDeclaration] = field(
        init=False, repr=False, compare=False
    )
    _interface_index: dict[str, InterfaceDeclaration] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "interfaces", tuple(self.interfaces))
        object.__setattr__(self, "_class_index", _first_by_name(self.classes))
        object.__setattr__(self, "_interface_index", _first_by_name(self.interfaces))

    def find_class(self, name: str) -> ClassDeclaration | None:
        """Return the first class declared with ``name``."""
        return self._class_index.get(name)

    def find_interface(self, name: str) -> InterfaceDeclaration | None:
        """Return the first interface declared with ``name``."""
        return self._interface_index.get(name)

    def depth(self, declaration: ClassDeclaration) -> int:
        """Compute the inheritance depth of ``declaration``.

        Args:
            declaration: Class to resolve

        Returns:
            Depth >= 0; 0 when no base reference resolves
        """
        return self._depth(declaration, frozenset({id(declaration)}))

    def _depth(self, declaration: ClassDeclaration, path: frozenset[int]) -> int:
        if declaration.base_types is None:
            return 0

        max_depth = 0

        for base_name in declaration.simple_base_names:
            base_class = self.find_class(base_name)

            if base_class is not None:
                if id(base_class) in path:
                    logger.warning(
                        f"Cyclic inheritance: '{declaration.name}' reaches "
                        f"'{base_class.name}' again; treating it as depth 0"
                    )
                    current = 0
                else:
                    current = self._depth(base_class, path | {id(base_class)})
                max_depth = max(max_depth, current)
                # A resolved base class ends the scan for this declaration
                break

            if self.find_interface(base_name) is not None:
                max_depth = max(max_depth, INTERFACE_DEPTH)

        return max_depth
