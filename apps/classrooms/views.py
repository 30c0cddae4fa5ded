from rest_framework import viewsets, status
from drf_spectacular.utils import extend_schema

from apps.accounts.services import get_directory_config
from apps.core.responses import success_response
from apps.core.serializers import UUID_PATTERN, get_classroom_id

from .serializers import (
    ClassroomSerializer,
    ClassroomCreateSerializer,
    TeacherSerializer,
    TeacherCreateSerializer,
)
from apps.classrooms.services import (
    create_classroom,
    get_classroom_by_id,
    list_classrooms,
    delete_classroom,
    create_teacher,
    list_teachers,
    delete_teacher,
)


class ClassroomViewSet(viewsets.ViewSet):
    """
    ViewSet for Classroom operations.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get all classrooms
    create: Create a new classroom (unique name)
    retrieve: Get a specific classroom
    destroy: Delete a classroom and everything scoped to it
    """

    serializer_class = ClassroomSerializer
    lookup_value_regex = UUID_PATTERN

    def list(self, request):
        serializer = ClassroomSerializer(list_classrooms(), many=True)
        return success_response({'classrooms': serializer.data})

    @extend_schema(request=ClassroomCreateSerializer, responses={201: ClassroomSerializer})
    def create(self, request):
        serializer = ClassroomCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        classroom = create_classroom(**serializer.validated_data)

        return success_response(
            {'classroom': ClassroomSerializer(classroom).data},
            message=f"Classroom {classroom.name} created",
            status_code=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, pk=None):
        classroom = get_classroom_by_id(classroom_id=pk)
        return success_response({'classroom': ClassroomSerializer(classroom).data})

    def destroy(self, request, pk=None):
        result = delete_classroom(classroom_id=pk)
        return success_response(
            {'deleted': result['deleted']},
            message=f"Classroom {result['name']} deleted",
        )


class TeacherViewSet(viewsets.ViewSet):
    """
    ViewSet for Teacher credentials.

    list: Get teachers in scope
    create: Create a teacher (unique password, not a super-admin code)
    destroy: Delete a teacher
    """

    serializer_class = TeacherSerializer
    lookup_value_regex = UUID_PATTERN

    def list(self, request):
        teachers = list_teachers(classroom_id=get_classroom_id(request))
        return success_response({'teachers': TeacherSerializer(teachers, many=True).data})

    @extend_schema(request=TeacherCreateSerializer, responses={201: TeacherSerializer})
    def create(self, request):
        serializer = TeacherCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        teacher = create_teacher(
            password=data['password'],
            name=data['name'],
            classroom_id=data['classroom'],
            protected_codes=get_directory_config().super_admin_codes,
        )

        return success_response(
            {'teacher': TeacherSerializer(teacher).data},
            message=f"Teacher {teacher.name} created. Login password: {data['password']}",
            status_code=status.HTTP_201_CREATED,
        )

    def destroy(self, request, pk=None):
        delete_teacher(teacher_id=pk, classroom_id=get_classroom_id(request))
        return success_response(message="Teacher deleted")
