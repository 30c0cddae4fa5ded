from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action, api_view
from drf_spectacular.utils import extend_schema, inline_serializer

from apps.core.responses import success_response
from apps.core.serializers import get_classroom_id

from .serializers import (
    LoginSerializer,
    AccountCreateSerializer,
    AccountSerializer,
    BalanceAdjustSerializer,
    BalanceSetSerializer,
    MyBalanceSerializer,
)
from .services import (
    resolve_login,
    create_account,
    get_account,
    list_accounts,
    delete_account,
    adjust_balance,
    set_balance,
)


class NewBalanceResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    new_balance = serializers.IntegerField()


@extend_schema(
    request=LoginSerializer,
    responses={
        200: inline_serializer(
            name='LoginResponse',
            fields={
                'success': serializers.BooleanField(),
                'role': serializers.CharField(),
            },
        ),
    },
    description="Resolve a login code to super-admin, teacher or student.",
    tags=['auth'],
)
@api_view(['POST'])
def login(request):
    """Resolve a login code; no session or token is issued."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    result = resolve_login(
        code=serializer.validated_data['code'],
        classroom_id=serializer.validated_data['classroom'],
        role_hint=serializer.validated_data['type'],
    )

    return success_response({'role': result.role, **result.profile})


class AccountViewSet(viewsets.ViewSet):
    """
    ViewSet for student accounts, addressed by code within a classroom scope.

    list: Get all students in scope, sorted by name
    create: Create a student
    retrieve: Get one student
    destroy: Delete a student and their purchase history
    adjust_balance: Add a signed amount to the balance
    set_balance: Overwrite the balance
    my_balance: Student-facing balance lookup by code
    """

    serializer_class = AccountSerializer
    lookup_field = 'code'
    lookup_value_regex = '[^/]+'

    def list(self, request):
        accounts = list_accounts(classroom_id=get_classroom_id(request))
        return success_response({'students': AccountSerializer(accounts, many=True).data})

    @extend_schema(request=AccountCreateSerializer, responses={201: AccountSerializer})
    def create(self, request):
        serializer = AccountCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        account = create_account(
            code=data['code'],
            name=data['name'],
            balance=data['balance'],
            classroom_id=data['classroom'],
        )

        return success_response(
            {'student': AccountSerializer(account).data},
            message=f"Student {account.name} created",
            status_code=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, code=None):
        account = get_account(code=code, classroom_id=get_classroom_id(request))
        return success_response({'student': AccountSerializer(account).data})

    def destroy(self, request, code=None):
        account = delete_account(code=code, classroom_id=get_classroom_id(request))
        return success_response(message=f"Student {account.name} deleted")

    @extend_schema(request=BalanceAdjustSerializer, responses={200: NewBalanceResponseSerializer})
    @action(detail=True, methods=['post'], url_path='adjust-balance')
    def adjust_balance(self, request, code=None):
        """
        Add a signed amount to the balance.

        POST /api/students/{code}/adjust-balance/
        Body: {"amount": -10, "classroom": "optional uuid"}
        """
        serializer = BalanceAdjustSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account = adjust_balance(
            code=code,
            amount=serializer.validated_data['amount'],
            classroom_id=get_classroom_id(request),
        )
        return success_response({'new_balance': account.balance})

    @extend_schema(request=BalanceSetSerializer, responses={200: NewBalanceResponseSerializer})
    @action(detail=True, methods=['post'], url_path='set-balance')
    def set_balance(self, request, code=None):
        """
        Overwrite the balance.

        POST /api/students/{code}/set-balance/
        Body: {"balance": 100, "classroom": "optional uuid"}
        """
        serializer = BalanceSetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account = set_balance(
            code=code,
            balance=serializer.validated_data['balance'],
            classroom_id=get_classroom_id(request),
        )
        return success_response({'new_balance': account.balance})

    @extend_schema(request=MyBalanceSerializer)
    @action(detail=False, methods=['post'], url_path='my-balance')
    def my_balance(self, request):
        """
        Balance lookup for the logged-in student.

        POST /api/students/my-balance/
        Body: {"code": "101"}
        """
        serializer = MyBalanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        account = get_account(
            code=serializer.validated_data['code'],
            classroom_id=serializer.validated_data['classroom'],
        )
        return success_response({'balance': account.balance})
