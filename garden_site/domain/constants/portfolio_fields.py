"""Constants for PortfolioItem document field names"""


class PortfolioFields:
    """Field name constants for PortfolioItem documents"""
    TITLE = "title"
    DESCRIPTION = "description"
    IMAGE_URL = "imageUrl"
    IMAGES = "images"
    SERVICE_ID = "serviceId"
    DATE = "completionDate"
    LOCATION = "location"
    DURATION = "projectDuration"
    DIFFICULTY = "difficultyLevel"
    CLIENT_TESTIMONIAL = "clientTestimonial"
    SEO = "seo"
    FEATURED = "featured"
    STATUS = "status"
    VIEW_COUNT = "viewCount"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"


class ImagePairFields:
    BEFORE = "before"
    AFTER = "after"
    CAPTION = "caption"
    RICH_DESCRIPTION = "richDescription"
    ORDER = "order"


class ClientTestimonialFields:
    CLIENT_NAME = "clientName"
    COMMENT = "comment"
    DISPLAY_PERMISSION = "displayPermission"


class SeoFields:
    META_TITLE = "metaTitle"
    META_DESCRIPTION = "metaDescription"
    TAGS = "tags"
