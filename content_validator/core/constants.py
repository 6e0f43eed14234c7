"""
Shared constants for content validation.

This module consolidates constants used across the codebase to ensure
consistency and make it easier to modify common values.
"""

# Record fields used for text comparison, in query priority order
TEXT_FIELDS = ("title", "content", "description", "text")
KNOWN_FIELDS = TEXT_FIELDS + ("url",)

# Keyword extraction
STOP_WORDS = frozenset({"the", "and", "that", "this", "with", "from"})
MIN_KEYWORD_LENGTH = 4  # Tokens must be longer than 3 characters

# Classification messages
MESSAGE_APPROVED = "Content verified and relevant"
MESSAGE_REJECTED = "Content appears irrelevant or insufficient"
MESSAGE_NEEDS_REVIEW = "Content needs manual review - moderate relevance"

# Inconclusive outcomes
MESSAGE_MISSING_CREDENTIALS = "Serper API key not configured"
MESSAGE_INSUFFICIENT_CONTENT = "Insufficient content for validation"
MESSAGE_NO_RESULTS = "No search results found for comparison"
MESSAGE_NO_KEYWORDS = "No significant keywords found in search results"
MESSAGE_VALIDATION_ERROR = "Validation error: {detail}"

# Issue templates
ISSUE_REJECTED_TEMPLATE = "Content validation failed: {message} ({percentage}% confidence)"
ISSUE_PENDING_TEMPLATE = "Content needs review: {message} ({percentage}% confidence)"
SEARCH_VALIDATION_MESSAGE_TEMPLATE = "{message} (Confidence: {percentage}%)"

# Review fields appended to exports on request; never part of imported columns
REVIEW_EXPORT_FIELDS = ("id", "status", "confidence", "message", "issues", "imported_at")
ISSUE_SEPARATOR = "; "

# Export
EXPORT_FILENAME = "scraped_data.csv"
ACCEPTED_CSV_CONTENT_TYPES = {
    "text/csv",
    "application/csv",
    "application/vnd.ms-excel",
    "application/octet-stream",
    "text/plain",
    None,
}
