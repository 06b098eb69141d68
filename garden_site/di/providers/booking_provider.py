from typing import TYPE_CHECKING

from ...domain.repositories.appointment_repository import AppointmentRepository
from ...domain.repositories.inquiry_repository import InquiryRepository
from ...application.services.appointment_service import AppointmentService
from ...application.services.inquiry_service import InquiryService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class BookingProvider:
    """Booking provider - registers inquiry and appointment services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            InquiryService,
            InquiryService(inquiry_repository=container.get(InquiryRepository))
        )
        container.register_singleton(
            AppointmentService,
            AppointmentService(appointment_repository=container.get(AppointmentRepository))
        )
