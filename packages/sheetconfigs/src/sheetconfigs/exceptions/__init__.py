"""
Base of the sheetconfigs exception hierarchy.

Registry errors live next to the registry (``sheetconfigs.registry.exceptions``)
and identity errors next to the type tags (``sheetconfigs.identity.exceptions``).
Both derive from :class:`SheetConfigsError` and are re-exported from the
top-level ``sheetconfigs`` package; they are not re-exported here because the
sub-package modules import this one.
"""
from .base import SheetConfigsError

__all__ = ["SheetConfigsError"]
