"""
Classroom management service.

Handles classroom CRUD operations with proper transaction safety.
"""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.classrooms.models import Classroom

from .exceptions import ClassroomNotFoundError, DuplicateClassroomNameError

logger = logging.getLogger(__name__)


def create_classroom(*, name: str, description: str = '') -> Classroom:
    """
    Create a new classroom.

    Args:
        name: Unique classroom name
        description: Optional description

    Returns:
        Created Classroom instance

    Raises:
        DuplicateClassroomNameError: If the name is already taken
    """
    if Classroom.objects.filter(name=name).exists():
        raise DuplicateClassroomNameError(f"Classroom '{name}' already exists")

    try:
        with transaction.atomic():
            classroom = Classroom.objects.create(name=name, description=description)
    except IntegrityError:
        # Lost a race against a concurrent create with the same name
        raise DuplicateClassroomNameError(f"Classroom '{name}' already exists")

    logger.info("Created classroom %s (%s)", classroom.name, classroom.id)
    return classroom


def get_classroom_by_id(*, classroom_id: UUID) -> Classroom:
    """
    Get a classroom by ID.

    Raises:
        ClassroomNotFoundError: If classroom doesn't exist
    """
    try:
        return Classroom.objects.get(id=classroom_id)
    except Classroom.DoesNotExist:
        raise ClassroomNotFoundError(f"Classroom with ID {classroom_id} not found")


def list_classrooms():
    return Classroom.objects.all().order_by('name')


@transaction.atomic
def delete_classroom(*, classroom_id: UUID) -> dict:
    """
    Delete a classroom.

    Cascading deletes will automatically remove:
    - All student accounts
    - All products
    - All purchase requests
    - All teachers bound to the classroom

    Returns:
        Dict with the deleted classroom name and per-model deletion counts

    Raises:
        ClassroomNotFoundError: If classroom doesn't exist
    """
    try:
        classroom = (
            Classroom.objects
            .select_for_update()
            .get(id=classroom_id)
        )
    except Classroom.DoesNotExist:
        raise ClassroomNotFoundError(f"Classroom with ID {classroom_id} not found")

    name = classroom.name
    _, per_model = classroom.delete()
    logger.info("Deleted classroom %s (%s): %s", name, classroom_id, per_model)
    return {'name': name, 'deleted': per_model}
