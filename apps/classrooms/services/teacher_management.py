"""
Teacher management service.

Teachers are identified by their password, which is also their login code,
so passwords must be unique and may never shadow a super-admin code.
"""

import logging
from typing import Iterable, Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.classrooms.models import Teacher

from .exceptions import (
    DuplicateTeacherPasswordError,
    ProtectedCredentialError,
    TeacherNotFoundError,
)
from .scoping import resolve_classroom, scope_filter

logger = logging.getLogger(__name__)


def create_teacher(
    *,
    password: str,
    name: str = '',
    classroom_id: Optional[UUID] = None,
    protected_codes: Iterable[str] = ()
) -> Teacher:
    """
    Create a teacher credential.

    Args:
        password: Login code for the teacher (must be unique)
        name: Optional display name
        classroom_id: Classroom the teacher manages (None for unscoped)
        protected_codes: Super-admin codes that may not be reused

    Returns:
        Created Teacher instance

    Raises:
        DuplicateTeacherPasswordError: If the password is already in use
        ProtectedCredentialError: If the password is a super-admin code
        ClassroomNotFoundError: If classroom_id doesn't exist
    """
    if Teacher.objects.filter(password=password).exists():
        raise DuplicateTeacherPasswordError()

    if password in set(protected_codes):
        raise ProtectedCredentialError()

    classroom = resolve_classroom(classroom_id)

    try:
        with transaction.atomic():
            teacher = Teacher.objects.create(
                password=password,
                name=name,
                classroom=classroom,
            )
    except IntegrityError:
        raise DuplicateTeacherPasswordError()

    logger.info("Created teacher %s (%s)", teacher.name or '-', teacher.id)
    return teacher


def list_teachers(*, classroom_id: Optional[UUID] = None):
    return Teacher.objects.filter(**scope_filter(classroom_id)).order_by('name', 'created_at')


@transaction.atomic
def delete_teacher(*, teacher_id: UUID, classroom_id: Optional[UUID] = None) -> None:
    """
    Delete a teacher credential.

    Raises:
        TeacherNotFoundError: If the teacher is not in the scope
    """
    deleted, _ = Teacher.objects.filter(id=teacher_id, **scope_filter(classroom_id)).delete()
    if not deleted:
        raise TeacherNotFoundError(f"Teacher with ID {teacher_id} not found")
    logger.info("Deleted teacher %s", teacher_id)
