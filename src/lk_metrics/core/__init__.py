"""Core functionality for lk-metrics."""

from .exceptions import (
    ConfigError,
    DiscoveryError,
    InitializationError,
    LKMetricsError,
    ParsingError,
)
from .models import (
    BaseTypeRef,
    CalleeKind,
    ClassDeclaration,
    DeclarationSet,
    InterfaceDeclaration,
    MethodDeclaration,
)

__all__ = [
    "BaseTypeRef",
    "CalleeKind",
    "ClassDeclaration",
    "ConfigError",
    "DeclarationSet",
    "DiscoveryError",
    "InitializationError",
    "InterfaceDeclaration",
    "LKMetricsError",
    "MethodDeclaration",
    "ParsingError",
]
