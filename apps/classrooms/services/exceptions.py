"""
Domain-specific exceptions for classrooms app.

These exceptions represent business rule violations and are converted
to failure responses by the shared exception handler.
"""

from apps.core.exceptions import NotFoundError, PreconditionFailedError


class ClassroomNotFoundError(NotFoundError):
    """Raised when a classroom does not exist."""
    code = 'classroom_not_found'
    default_message = 'Classroom not found'


class DuplicateClassroomNameError(PreconditionFailedError):
    """Raised when a classroom name is already taken."""
    code = 'duplicate_classroom_name'
    default_message = 'A classroom with this name already exists'


class TeacherNotFoundError(NotFoundError):
    """Raised when a teacher does not exist."""
    code = 'teacher_not_found'
    default_message = 'Teacher not found'


class DuplicateTeacherPasswordError(PreconditionFailedError):
    """Raised when a teacher password is already in use."""
    code = 'duplicate_teacher_password'
    default_message = 'This password is already in use'


class ProtectedCredentialError(PreconditionFailedError):
    """Raised when a teacher password collides with a super-admin code."""
    code = 'protected_credential'
    default_message = 'The super-admin password cannot be used'
