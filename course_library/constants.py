"""
Application-level constants for hardcoded protocol behavior.

These values define the wire contract of the API (error payload shape,
identifier encoding, field limits) and should NEVER be changed via
environment variables or configuration.

For configurable values (database, logging), see course_library/settings.py.
"""

# ============================================================================
# Problem Details (application/problem+json)
# ============================================================================

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

VALIDATION_PROBLEM_TYPE = (
    "https://dummycourselibrary.com/modelvalidationproblem"
)
VALIDATION_PROBLEM_TITLE = "One or more validation errors occured."
INPUT_PROBLEM_TITLE = "One or more errors on input occured."
PROBLEM_DETAIL = "See the errors property for details."

# Key used in the errors map for failures that concern the whole document
# rather than a single member
ROOT_ERROR_KEY = "$"

UNEXPECTED_FAULT_MESSAGE = (
    "An unexpected fault happened. Please try again later."
)


# ============================================================================
# Identifier Sets
# ============================================================================

# Separator between identifiers in a composite path segment: (id1,id2,...)
ID_SET_SEPARATOR = ","


# ============================================================================
# Field Limits
# ============================================================================

AUTHOR_NAME_MAX_LENGTH = 50
AUTHOR_MAIN_CATEGORY_MAX_LENGTH = 50
COURSE_TITLE_MAX_LENGTH = 100
COURSE_DESCRIPTION_MAX_LENGTH = 1500


# ============================================================================
# HTTP
# ============================================================================

# Methods advertised by OPTIONS /authors
AUTHORS_ALLOWED_METHODS = "GET,OPTIONS,POST"
