class GlobalMessages:
    # Contact Messages
    CONTACT_MESSAGE_SENT = "Message sent successfully"

    # Auth Messages
    UNAUTHORIZED = "Unauthorized"

    # Blog Messages
    BLOG_TITLE_REQUIRED = "Title is required"
    BLOG_CONTENT_REQUIRED = "Content is required"
    BLOG_CONTENT_TOO_SHORT = "Content must be at least 10 characters"
    BLOG_POST_NOT_FOUND = "Blog post not found"
    BLOG_POST_DELETED = "Blog post deleted successfully"

    # Project Messages
    PROJECT_TITLE_REQUIRED = "Title is required"
    PROJECT_NOT_FOUND = "Project not found"
    PROJECT_DELETED = "Project deleted successfully"

    # Upload Messages
    IMAGE_INVALID_TYPE = "Only image uploads are allowed"
    IMAGE_TOO_LARGE = "Image must be smaller than {limit_mb}MB"

    # Generic
    INVALID_REQUEST = "Invalid request"
    INTERNAL_ERROR = "Internal server error"
