class SheetConfigsError(Exception):
    """Base for all sheetconfigs exceptions."""
