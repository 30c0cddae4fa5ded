from rest_framework import serializers
from .models import Account
from apps.core.serializers import INTEGER_MAX, INTEGER_MIN
from .services.login_resolution import HINT_ADMIN, HINT_STUDENT


# =============================================================================
# Input Serializers
# =============================================================================

class LoginSerializer(serializers.Serializer):
    """
    Validate login input.

    Fields:
        code (str): Student code, teacher password or super-admin code
        type (str): Optional hint restricting resolution to 'admin' or 'student'
        classroom (UUID): Optional classroom scope for student codes
    """

    code = serializers.CharField(max_length=128, trim_whitespace=True)
    type = serializers.ChoiceField(
        choices=[HINT_ADMIN, HINT_STUDENT],
        required=False,
        allow_null=True,
        default=None,
    )
    classroom = serializers.UUIDField(required=False, allow_null=True, default=None)


class AccountCreateSerializer(serializers.Serializer):
    """Validate input for creating a student account."""

    code = serializers.CharField(max_length=64)
    name = serializers.CharField(max_length=100)
    balance = serializers.IntegerField(
        required=False, default=0, min_value=INTEGER_MIN, max_value=INTEGER_MAX
    )
    classroom = serializers.UUIDField(required=False, allow_null=True, default=None)


class BalanceAdjustSerializer(serializers.Serializer):
    """Signed amount added to the current balance."""

    amount = serializers.IntegerField(min_value=INTEGER_MIN, max_value=INTEGER_MAX)


class BalanceSetSerializer(serializers.Serializer):
    """Absolute balance written over the current one."""

    balance = serializers.IntegerField(min_value=INTEGER_MIN, max_value=INTEGER_MAX)


class MyBalanceSerializer(serializers.Serializer):
    code = serializers.CharField(max_length=64)
    classroom = serializers.UUIDField(required=False, allow_null=True, default=None)


# =============================================================================
# Output Serializers
# =============================================================================

class AccountSerializer(serializers.ModelSerializer):
    """Student account as shown to teachers."""

    class Meta:
        model = Account
        fields = [
            'id',
            'code',
            'name',
            'balance',
            'classroom',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

