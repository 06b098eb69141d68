"""
Appointment Service
===================

Application service for appointments booked through the public form or
entered by staff.
"""
import logging
from typing import Any, Dict, List, Optional

from garden_site.domain.models.appointment import Appointment
from garden_site.domain.repositories.appointment_repository import AppointmentRepository
from garden_site.utils.identifiers import EntityId

logger = logging.getLogger(__name__)


class AppointmentService:
    """Application service for appointment operations."""

    def __init__(self, appointment_repository: AppointmentRepository):
        self._repository = appointment_repository

    async def list_appointments(self) -> List[Appointment]:
        """List appointments, earliest first."""
        return await self._repository.find_all()

    async def get_appointment(self, appointment_id: EntityId) -> Optional[Appointment]:
        return await self._repository.find_by_id(appointment_id)

    async def create_appointment(self, values: Dict[str, Any]) -> Appointment:
        """
        Book an appointment.

        Args:
            values: Attribute name -> value; None values take model defaults

        Returns:
            Persisted appointment
        """
        values = {key: value for key, value in values.items() if value is not None}
        appointment = await self._repository.create(Appointment(**values))
        logger.info(
            "Appointment %s booked for service %s on %s",
            appointment.id, appointment.service_id, appointment.date,
        )
        return appointment

    async def update_appointment(
        self,
        appointment_id: EntityId,
        changes: Dict[str, Any],
    ) -> Optional[Appointment]:
        return await self._repository.update(appointment_id, changes)

    async def delete_appointment(self, appointment_id: EntityId) -> bool:
        return await self._repository.delete(appointment_id)
