from rest_framework import serializers
from .models import Classroom, Teacher


class ClassroomSerializer(serializers.ModelSerializer):
    """Main serializer for classrooms."""

    student_count = serializers.SerializerMethodField()
    product_count = serializers.SerializerMethodField()

    class Meta:
        model = Classroom
        fields = [
            'id',
            'name',
            'description',
            'student_count',
            'product_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_student_count(self, obj):
        return obj.accounts.count()

    def get_product_count(self, obj):
        return obj.products.count()


class ClassroomCreateSerializer(serializers.Serializer):
    """Serializer for creating classrooms."""

    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')


class TeacherSerializer(serializers.ModelSerializer):
    """Teacher listing; the password is never echoed back."""

    classroom_name = serializers.CharField(source='classroom.name', read_only=True, default=None)

    class Meta:
        model = Teacher
        fields = ['id', 'name', 'classroom', 'classroom_name', 'created_at']
        read_only_fields = fields


class TeacherCreateSerializer(serializers.Serializer):
    """Serializer for creating teachers."""

    password = serializers.CharField(max_length=128)
    name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    classroom = serializers.UUIDField(required=False, allow_null=True, default=None)
