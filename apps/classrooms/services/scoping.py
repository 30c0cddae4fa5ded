"""
Tenant scoping for every entity query.

Records either belong to a classroom or to the unscoped (single class)
space. A lookup made with a classroom id only sees that classroom's rows;
a lookup without one only sees unscoped rows. Cross-tenant lookups
therefore fail as not-found instead of leaking.
"""

from typing import Optional
from uuid import UUID

from apps.classrooms.models import Classroom

from .exceptions import ClassroomNotFoundError


def scope_filter(classroom_id: Optional[UUID]) -> dict:
    """Return queryset filter kwargs restricting rows to one scope."""
    if classroom_id is None:
        return {'classroom__isnull': True}
    return {'classroom_id': classroom_id}


def resolve_classroom(classroom_id: Optional[UUID]) -> Optional[Classroom]:
    """
    Load the classroom a write operation is scoped to.

    Returns None for the unscoped space.

    Raises:
        ClassroomNotFoundError: If an id is given but does not exist
    """
    if classroom_id is None:
        return None
    try:
        return Classroom.objects.get(id=classroom_id)
    except Classroom.DoesNotExist:
        raise ClassroomNotFoundError(f"Classroom with ID {classroom_id} not found")
