from .protocols import ConfigsAdder, ConfigsProvider

__all__ = ["ConfigsProvider", "ConfigsAdder"]
