"""Shared constants for the timeline project."""

TIMELINE_STR = "timeline"

# Response messages
MISSING_FIELDS_MSG = "Missing required fields"
CONTENT_TOO_LONG_MSG = "Content too long (max 50 characters)"
INVALID_JSON_MSG = "Invalid JSON body"
FETCH_FAILED_MSG = "Failed to fetch posts"
CREATE_FAILED_MSG = "Failed to create post"
CREATE_SUCCESS_MSG = "Post created successfully"

# Limits
MAX_CONTENT_LENGTH = 50
MAX_POSTS = 1000
