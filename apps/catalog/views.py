from rest_framework import viewsets, status
from rest_framework.decorators import action
from drf_spectacular.utils import extend_schema

from apps.core.responses import success_response
from apps.core.serializers import UUID_PATTERN, get_classroom_id

from .serializers import (
    ProductCreateSerializer,
    ProductFilterSerializer,
    ProductSerializer,
    StockUpdateSerializer,
)
from .services import (
    create_product,
    get_product,
    list_products,
    delete_product,
    set_stock,
)


class ProductViewSet(viewsets.ViewSet):
    """
    ViewSet for shop products.

    list: Get products in scope, newest first (?in_stock=true)
    create: Create a product
    retrieve: Get one product
    destroy: Delete a product
    stock: Overwrite the stock count
    """

    serializer_class = ProductSerializer
    lookup_value_regex = UUID_PATTERN

    def list(self, request):
        filter_serializer = ProductFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        products = list_products(
            classroom_id=get_classroom_id(request),
            in_stock_only=filter_serializer.validated_data['in_stock'],
        )
        return success_response({'products': ProductSerializer(products, many=True).data})

    @extend_schema(request=ProductCreateSerializer, responses={201: ProductSerializer})
    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        product = create_product(
            name=data['name'],
            price=data['price'],
            stock=data['stock'],
            description=data['description'],
            classroom_id=data['classroom'],
        )

        return success_response(
            {'product': ProductSerializer(product).data},
            message=f"Product {product.name} added",
            status_code=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, pk=None):
        product = get_product(product_id=pk, classroom_id=get_classroom_id(request))
        return success_response({'product': ProductSerializer(product).data})

    def destroy(self, request, pk=None):
        delete_product(product_id=pk, classroom_id=get_classroom_id(request))
        return success_response(message="Product deleted")

    @extend_schema(request=StockUpdateSerializer, responses={200: ProductSerializer})
    @action(detail=True, methods=['post'])
    def stock(self, request, pk=None):
        """
        Overwrite the stock count.

        POST /api/products/{id}/stock/
        Body: {"stock": 5}
        """
        serializer = StockUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = set_stock(
            product_id=pk,
            stock=serializer.validated_data['stock'],
            classroom_id=get_classroom_id(request),
        )
        return success_response(
            {'product': ProductSerializer(product).data},
            message="Stock updated",
        )
