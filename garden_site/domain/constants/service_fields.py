"""Constants for Service document field names"""


class ServiceFields:
    """Field name constants for Service documents"""
    NAME = "name"
    DESCRIPTION = "description"
    SHORT_DESC = "shortDesc"
    PRICE = "price"
    IMAGE_URL = "imageUrl"
    FEATURED = "isFeatured"  # exposed to the application as ``featured``
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
