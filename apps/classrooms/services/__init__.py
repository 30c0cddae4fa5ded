"""
Classrooms app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions.
"""

from .exceptions import (
    ClassroomNotFoundError,
    DuplicateClassroomNameError,
    TeacherNotFoundError,
    DuplicateTeacherPasswordError,
    ProtectedCredentialError,
)

from .scoping import (
    scope_filter,
    resolve_classroom,
)

from .classroom_management import (
    create_classroom,
    get_classroom_by_id,
    list_classrooms,
    delete_classroom,
)

from .teacher_management import (
    create_teacher,
    list_teachers,
    delete_teacher,
)


__all__ = [
    # Exceptions
    'ClassroomNotFoundError',
    'DuplicateClassroomNameError',
    'TeacherNotFoundError',
    'DuplicateTeacherPasswordError',
    'ProtectedCredentialError',

    # Scoping
    'scope_filter',
    'resolve_classroom',

    # Classroom Management
    'create_classroom',
    'get_classroom_by_id',
    'list_classrooms',
    'delete_classroom',

    # Teacher Management
    'create_teacher',
    'list_teachers',
    'delete_teacher',
]
