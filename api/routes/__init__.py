"""API routes package"""

from . import auth, categories, documents, assets, dashboard, food, health

__all__ = ["auth", "categories", "documents", "assets", "dashboard", "food", "health"]
