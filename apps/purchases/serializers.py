from rest_framework import serializers
from .models import PurchaseRequest, PurchaseStatus


# =============================================================================
# Input Serializers
# =============================================================================

class PurchaseCreateSerializer(serializers.Serializer):
    """
    Validate input for a student's purchase request.

    Fields:
        student_code (str): Code of the requesting student
        product (UUID): Product to buy one unit of
        classroom (UUID): Optional classroom scope
    """

    student_code = serializers.CharField(max_length=64)
    product = serializers.UUIDField()
    classroom = serializers.UUIDField(required=False, allow_null=True, default=None)


class DecisionSerializer(serializers.Serializer):
    approve = serializers.BooleanField()


class PurchaseFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for purchase listing.

    Query Parameters:
        status (str): Filter by status (pending, approved, rejected)
        student (str): Filter by student code
    """

    status = serializers.ChoiceField(choices=PurchaseStatus.choices, required=False)
    student = serializers.CharField(max_length=64, required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class PurchaseRequestSerializer(serializers.ModelSerializer):
    """
    Main serializer for purchase requests.

    Name and price fields are the snapshot taken at request time and stay
    readable after the student or product is gone.
    """

    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = PurchaseRequest
        fields = [
            'id',
            'classroom',
            'account',
            'account_code',
            'account_name',
            'product',
            'product_name',
            'price',
            'status',
            'status_display',
            'created_at',
            'approved_at',
            'decided_at',
        ]
        read_only_fields = fields
