#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the sonder journal utilities.

The grouping, sorting, ranking and itinerary functions are total over
well-formed inputs and raise nothing of their own. These exceptions cover
the edges of the package: reading journal snapshots, validating the data
inside them, and the command-line interface.

Exception Hierarchy:
    Exception (built-in)
    └── SonderError - Base for all sonder errors
        ├── ValidationError - Invalid caller input (unknown ids, bad values)
        ├── SnapshotError - Base for snapshot file problems
        │   ├── SnapshotParseError - Unreadable YAML or wrong document shape
        │   └── SnapshotValidationError - Entity data missing or malformed
        └── ExportError - Writing a snapshot or export failed

Usage:
    from sonder.core.exceptions import SnapshotError, ValidationError

    try:
        snapshot = JournalSnapshot.from_file(path)
    except SnapshotError as e:
        logger.log_error(e, {"path": str(path)})
"""


class SonderError(Exception):
    """
    Base exception for the sonder package.

    Catch this to handle any error raised deliberately by sonder code.
    Errors raised by caller-supplied callbacks (height estimators and the
    like) are never wrapped and propagate unchanged.
    """

    pass


class ValidationError(SonderError):
    """
    Exception for invalid caller input.

    Raised when a value supplied by the caller cannot be used:
    - Unknown trip or log identifiers passed to the CLI
    - Values that cannot be converted to the expected type
    - Missing required fields

    Examples:
        >>> raise ValidationError("Trip not found: 'trip-9'")
        >>> raise ValidationError("Required field 'user_id' missing or empty")
    """

    pass


class SnapshotError(SonderError):
    """
    Base exception for journal snapshot problems.

    See Also:
        SnapshotParseError, SnapshotValidationError
    """

    pass


class SnapshotParseError(SnapshotError):
    """
    Exception for snapshot documents that cannot be read.

    Raised when:
    - The file is not valid YAML (or JSON)
    - The top-level document is not a mapping
    - A section such as 'logs' is not a list

    Examples:
        >>> raise SnapshotParseError("Invalid YAML: mapping values are not allowed here")
        >>> raise SnapshotParseError("Section 'trips' must be a list")
    """

    pass


class SnapshotValidationError(SnapshotError):
    """
    Exception for entity data that fails validation.

    Raised when a log, trip or place record is missing a required field
    or carries a value of the wrong type.

    Examples:
        >>> raise SnapshotValidationError("Log missing required field 'user_id'")
        >>> raise SnapshotValidationError("Unknown rating: 'amazing'")
    """

    pass


class ExportError(SonderError):
    """
    Exception for failures while writing snapshots or exports.

    Examples:
        >>> raise ExportError("Cannot write snapshot: permission denied")
    """

    pass
