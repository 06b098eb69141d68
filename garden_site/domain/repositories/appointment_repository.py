"""
Appointment Repository Interface
================================
"""
from garden_site.domain.models.appointment import Appointment
from garden_site.domain.repositories.base_repository import CrudRepository


class AppointmentRepository(CrudRepository[Appointment]):
    """Appointments. ``find_all`` returns earliest ``date`` first."""
