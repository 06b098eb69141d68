"""Constants for BlogPost document field names"""


class BlogPostFields:
    """Field name constants for BlogPost documents"""
    TITLE = "title"
    CONTENT = "content"
    EXCERPT = "excerpt"
    IMAGE_URL = "imageUrl"
    AUTHOR_ID = "authorId"
    PUBLISHED_AT = "publishedAt"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
