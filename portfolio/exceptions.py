"""Application-level exception types.

Convention:
- ``ContentAccessError``: the content store or file layer failed to produce a
  node. The binding engine never catches it; it reaches the caller unmodified
  and no partial view model is returned.
- ``ValueError`` subclasses: content or declarations that are well-formed
  enough to read but cannot be used (unknown component type, invalid
  derivation graph, unsupported property values).

Missing properties and missing child collections are not errors: they are
resolved by field defaults and empty sequences.
"""

from __future__ import annotations


class ContentAccessError(Exception):
    """Raised when the content accessor itself fails to read a node."""


class ContentFormatError(ValueError):
    """Raised when raw content cannot be represented as a content node."""


class DerivationError(ValueError):
    """Raised when a spec declares derivations with unknown inputs or cycles."""


class UnknownComponentError(ValueError):
    """Raised when a node cannot be mapped to a registered component."""
