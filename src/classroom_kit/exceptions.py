"""Custom exceptions for classroom_kit."""


class ClassroomKitError(Exception):
    """Base exception for classroom_kit operations."""


class OutlineError(ClassroomKitError):
    """Walkthrough outline could not be validated."""
