# ABOUTME: Libris - a personal library catalog with stable catalog codes and field search.
# ABOUTME: Exposes the catalog service; storage backends live in libris.store.

from libris.service import CatalogService, ServiceNotReady, ServiceState

__all__ = ["CatalogService", "ServiceNotReady", "ServiceState"]
