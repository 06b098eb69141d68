"""Constants for Inquiry document field names"""


class InquiryFields:
    """Field name constants for Inquiry documents"""
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    MESSAGE = "message"
    SERVICE_ID = "serviceId"
    STATUS = "status"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
