"""Core functionality for govaddress."""

from govaddress.core.models import Entity, EntityCollection, Role
from govaddress.core.pipeline import DEFAULT_URL_PATHS, AddressPipeline, PageSource

__all__ = [
    "AddressPipeline",
    "PageSource",
    "DEFAULT_URL_PATHS",
    "Entity",
    "EntityCollection",
    "Role",
]
