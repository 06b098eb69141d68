"""
Appointment Model
=================

A booked visit for a service at a customer address.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from garden_site.utils.datetime_utils import now
from garden_site.utils.identifiers import EntityId


@dataclass
class Appointment:
    """
    Appointment domain model.

    Address fields are optional because the public booking form does not
    collect them; the admin form does.
    """
    name: str
    email: str
    phone: str
    service_id: EntityId
    date: datetime
    building_name: Optional[str] = None
    street_name: Optional[str] = None
    house_number: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    postal_code: Optional[str] = None
    priority: str = "Normal"  # "Normal" | "Urgent"
    notes: Optional[str] = None
    status: str = "Scheduled"  # "Scheduled" | "Completed" | "Cancelled" | "Rescheduled"
    id: Optional[EntityId] = None
    created_at: datetime = field(default_factory=now)
    updated_at: datetime = field(default_factory=now)
