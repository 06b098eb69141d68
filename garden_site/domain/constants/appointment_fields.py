"""Constants for Appointment document field names"""


class AppointmentFields:
    """Field name constants for Appointment documents"""
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    BUILDING_NAME = "buildingName"
    STREET_NAME = "streetName"
    HOUSE_NUMBER = "houseNumber"
    CITY = "city"
    COUNTY = "county"
    POSTAL_CODE = "postalCode"
    SERVICE_ID = "serviceId"
    DATE = "date"
    PRIORITY = "priority"
    NOTES = "notes"
    STATUS = "status"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
