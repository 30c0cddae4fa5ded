from rest_framework import viewsets, status
from rest_framework.decorators import action
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.core.responses import success_response
from apps.core.serializers import UUID_PATTERN, get_classroom_id

from .serializers import (
    DecisionSerializer,
    PurchaseCreateSerializer,
    PurchaseFilterSerializer,
    PurchaseRequestSerializer,
)
from .services import PurchaseWorkflowService


class PurchaseRequestViewSet(viewsets.ViewSet):
    """
    ViewSet for purchase requests.

    list: Get requests in scope, newest first (?status=, ?student=)
    create: A student requests one unit of a product
    retrieve: Get one request
    decide: Teacher approves or rejects a pending request
    student: Requests of one student
    history: Delete every request in scope
    """

    serializer_class = PurchaseRequestSerializer
    lookup_value_regex = UUID_PATTERN

    @extend_schema(parameters=[
        OpenApiParameter('status', str, enum=['pending', 'approved', 'rejected']),
        OpenApiParameter('student', str),
        OpenApiParameter('classroom', str),
    ])
    def list(self, request):
        filter_serializer = PurchaseFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        filters = filter_serializer.validated_data

        purchases = PurchaseWorkflowService.list_requests(
            classroom_id=get_classroom_id(request),
            status=filters.get('status'),
            account_code=filters.get('student'),
        )
        return success_response({'purchases': PurchaseRequestSerializer(purchases, many=True).data})

    @extend_schema(request=PurchaseCreateSerializer, responses={201: PurchaseRequestSerializer})
    def create(self, request):
        serializer = PurchaseCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        purchase = PurchaseWorkflowService.create_request(
            account_code=data['student_code'],
            product_id=data['product'],
            classroom_id=data['classroom'],
        )

        return success_response(
            {'purchase': PurchaseRequestSerializer(purchase).data},
            message="Request sent to the teacher for approval",
            status_code=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, pk=None):
        purchase = PurchaseWorkflowService.get_request(
            request_id=pk, classroom_id=get_classroom_id(request)
        )
        return success_response({'purchase': PurchaseRequestSerializer(purchase).data})

    @extend_schema(request=DecisionSerializer, responses={200: PurchaseRequestSerializer})
    @action(detail=True, methods=['post'])
    def decide(self, request, pk=None):
        """
        Approve or reject a pending request.

        POST /api/purchases/{id}/decide/
        Body: {"approve": true}
        """
        serializer = DecisionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        approve = serializer.validated_data['approve']

        purchase = PurchaseWorkflowService.decide(
            request_id=pk,
            approve=approve,
            classroom_id=get_classroom_id(request),
        )

        if approve:
            message = "Purchase approved, points deducted and stock updated"
        else:
            message = "Purchase rejected"
        return success_response(
            {'purchase': PurchaseRequestSerializer(purchase).data},
            message=message,
        )

    @action(detail=False, methods=['get'], url_path=r'student/(?P<code>[^/]+)')
    def student(self, request, code=None):
        """
        Requests of one student, newest first.

        GET /api/purchases/student/{code}/
        """
        purchases = PurchaseWorkflowService.list_requests(
            classroom_id=get_classroom_id(request),
            account_code=code,
        )
        return success_response({'purchases': PurchaseRequestSerializer(purchases, many=True).data})

    @action(detail=False, methods=['delete'])
    def history(self, request):
        """
        Delete every request in scope.

        DELETE /api/purchases/history/
        """
        deleted = PurchaseWorkflowService.purge_history(classroom_id=get_classroom_id(request))
        return success_response(
            {'deleted': deleted},
            message=f"Deleted {deleted} purchase records",
        )
