"""Source front-ends producing structural declarations."""

from .csharp import CSharpDeclarationReader

__all__ = ["CSharpDeclarationReader"]
