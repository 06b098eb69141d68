"""
User Model
==========

Back-office account (admin or staff).
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId


@dataclass
class User:
    """
    User domain model.

    ``password`` always holds a hash once the user has been persisted.
    """
    username: str
    email: str
    password: str
    name: str
    role: str = "staff"  # "admin" | "staff"
    id: Optional[EntityId] = None
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)

    def is_admin(self) -> bool:
        """Check if the user has the admin role."""
        return self.role == "admin"
