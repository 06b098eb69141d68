"""Constants for Testimonial document field names"""


class TestimonialFields:
    """Field name constants for Testimonial documents"""
    NAME = "name"
    ROLE = "role"
    CONTENT = "content"
    RATING = "rating"
    IMAGE_URL = "imageUrl"
    DISPLAY_ORDER = "displayOrder"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
