# sheetconfigs/identity/type_tag.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .exceptions import TypeTagError

__all__ = [
    "TypeTag",
    "TypeLike",
]

# Union type callers can use for "type-like" inputs
TypeLike = Union["TypeTag", type, str]

# Class attribute a record type may define to pin its tag
TAG_ATTR = "config_tag"


# -----------------------------------------------------------------------------
# TypeTag (Value Object)
# -----------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TypeTag:
    """
    Stable, hashable stand-in for "the type of a configuration record".

    Canonical string: "module.qualname".
    """

    module: str
    qualname: str

    def __post_init__(self) -> None:
        for field, value in (("module", self.module), ("qualname", self.qualname)):
            if not isinstance(value, str) or not value.strip():
                raise TypeTagError(f"{field} must be a non-empty string (got {value!r})")

    # ------------------- Canonical forms -------------------
    @property
    def as_str(self) -> str:
        """Return canonical dot form: 'module.qualname'."""
        return f"{self.module}.{self.qualname}"

    @property
    def name(self) -> str:
        """Return the last segment of the qualified name."""
        return self.qualname.rsplit(".", 1)[-1]

    def __str__(self) -> str:
        return self.as_str

    def __repr__(self) -> str:  # pragma: no cover
        return f"TypeTag({self.as_str})"

    # ------------------- Constructors -------------------
    @classmethod
    def from_str(cls, value: str) -> TypeTag:
        raw = value.strip()
        if not raw:
            raise TypeTagError("Type tag string cannot be empty")
        module, sep, qualname = raw.rpartition(".")
        if not sep or not module or not qualname:
            raise TypeTagError(f"Expected 'module.QualName', got {value!r}")
        return cls(module=module, qualname=qualname)

    @classmethod
    def from_type(cls, record_type: type) -> TypeTag:
        pinned = record_type.__dict__.get(TAG_ATTR)
        if pinned is not None:
            if isinstance(pinned, cls):
                return pinned
            if isinstance(pinned, str):
                return cls.from_str(pinned)
            raise TypeTagError(
                f"{record_type.__qualname__}.{TAG_ATTR} must be a string or TypeTag (got {pinned!r})"
            )
        return cls(module=record_type.__module__, qualname=record_type.__qualname__)

    @classmethod
    def get_for(cls, value: TypeLike | Any) -> TypeTag:
        """Coerce a type-like value into a TypeTag.

        :param value: a TypeTag, a record class or a 'module.QualName' string
        :return: a TypeTag instance

        :raises TypeTagError: If the input cannot be converted to a TypeTag.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, type):
            return cls.from_type(value)
        if isinstance(value, str):
            return cls.from_str(value)
        raise TypeTagError(f"Unsupported type tag input: {type(value).__name__}")
