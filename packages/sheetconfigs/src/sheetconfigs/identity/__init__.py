"""Record type tags.

A :class:`TypeTag` identifies the registration slot a record type lives in.
Classes, tags and canonical ``"module.QualName"`` strings are all accepted
wherever a record type is expected.
"""

from .exceptions import TypeTagError
from .type_tag import TAG_ATTR, TypeLike, TypeTag

__all__ = ["TypeTag", "TypeLike", "TypeTagError", "TAG_ATTR"]
