"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `findora/db/models/<table_name>.py`
    2. Import it here
"""

from findora.db.models.base import Base
from findora.db.models.user import User
from findora.db.models.seller_profile import SellerProfile
from findora.db.models.seller_document import SellerDocument

__all__ = [
    "Base",
    "User",
    "SellerProfile",
    "SellerDocument",
]
