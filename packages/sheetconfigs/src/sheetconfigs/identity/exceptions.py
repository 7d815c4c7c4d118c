# sheetconfigs/identity/exceptions.py


from sheetconfigs.exceptions.base import SheetConfigsError


class TypeTagError(SheetConfigsError, ValueError):
    """Raised when a value cannot be coerced into a TypeTag. Is the input type-like?"""
