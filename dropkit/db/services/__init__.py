from .catalog_service import CatalogService, CollectionNotFound
from .artwork_service import ArtworkService
