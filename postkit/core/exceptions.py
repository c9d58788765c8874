#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the postkit content toolkit.

Exception Hierarchy:
    Exception (built-in)
    ├── ValidationError - Data validation failures
    │   └── PostValidationError - Post metadata fails its contract
    ├── PostParseError - Post file cannot be read or split
    │   └── FrontmatterError - Front matter block is malformed
    └── ListingError - Post listing cannot be built or written

Usage:
    from postkit.core.exceptions import PostParseError, PostValidationError

    try:
        post = Post.from_file(path)
    except PostValidationError as e:
        logger.log_warning(f"Invalid post metadata: {e}")
    except PostParseError as e:
        logger.log_error(e, {"file": str(path)})
"""


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Invalid date formats
    - Missing required fields
    - Type mismatches

    Examples:
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
        >>> raise ValidationError("Missing required field: 'title'")
    """

    pass


class PostValidationError(ValidationError):
    """
    Exception for post metadata that breaks the content contract.

    Raised when front matter parses but its values are unusable:
    - Missing or empty title
    - Date that cannot be normalized to a calendar date

    Examples:
        >>> raise PostValidationError("Required field 'title' missing or empty")
        >>> raise PostValidationError("Invalid date: 'last tuesday'")
    """

    pass


class PostParseError(Exception):
    """
    Exception for post parsing failures.

    Raised when reading a post file or splitting it fails:
    - File reading errors
    - Encoding issues
    - YAML parsing errors

    Examples:
        >>> raise PostParseError("File is not valid UTF-8")
        >>> raise PostParseError("Cannot parse YAML front matter: invalid syntax")
    """

    pass


class FrontmatterError(PostParseError):
    """
    Exception for a malformed front matter block.

    Raised when the opening ``---`` delimiter has no matching closing
    delimiter, so the metadata and body cannot be told apart.

    Attributes:
        line_number: 1-indexed line where the problem starts
    """

    def __init__(self, message: str, line_number: int = 1) -> None:
        super().__init__(message)
        self.line_number = line_number


class ListingError(Exception):
    """
    Exception for post listing failures.

    Raised when the listing data file cannot be produced:
    - Posts directory missing
    - Output file not writable

    Examples:
        >>> raise ListingError("Posts directory not found: content/posts")
    """

    pass
