"""Static asset download and lookup."""
from .asset_provider import AssetProvider
from .catalog import AssetCatalog

__all__ = [
    'AssetProvider',
    'AssetCatalog',
]
