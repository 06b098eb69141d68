"""
MongoDB Appointment Repository
==============================
"""
from pymongo import ASCENDING

from garden_site.domain.constants.appointment_fields import AppointmentFields
from garden_site.domain.models.appointment import Appointment
from garden_site.domain.repositories.appointment_repository import AppointmentRepository
from garden_site.infrastructure.db.mongo_base_repository import MongoRepository


class MongoAppointmentRepository(MongoRepository[Appointment], AppointmentRepository):
    """MongoDB implementation of AppointmentRepository."""

    ENTITY_CLASS = Appointment
    ENTITY_NAME = "appointment"
    COLLECTION_NAME = "appointments"
    FIELD_MAP = {
        "name": AppointmentFields.NAME,
        "email": AppointmentFields.EMAIL,
        "phone": AppointmentFields.PHONE,
        "building_name": AppointmentFields.BUILDING_NAME,
        "street_name": AppointmentFields.STREET_NAME,
        "house_number": AppointmentFields.HOUSE_NUMBER,
        "city": AppointmentFields.CITY,
        "county": AppointmentFields.COUNTY,
        "postal_code": AppointmentFields.POSTAL_CODE,
        "service_id": AppointmentFields.SERVICE_ID,
        "date": AppointmentFields.DATE,
        "priority": AppointmentFields.PRIORITY,
        "notes": AppointmentFields.NOTES,
        "status": AppointmentFields.STATUS,
        "created_at": AppointmentFields.CREATED_AT,
        "updated_at": AppointmentFields.UPDATED_AT,
    }
    FOREIGN_KEYS = ("service_id",)
    DEFAULT_SORT = (AppointmentFields.DATE, ASCENDING)
