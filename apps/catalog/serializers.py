from rest_framework import serializers
from .models import Product
from apps.core.serializers import INTEGER_MAX


# =============================================================================
# Input Serializers
# =============================================================================

class ProductCreateSerializer(serializers.Serializer):
    """
    Validate input for creating a product.

    Fields:
        name (str): Product name
        price (int): Price in points, >= 0
        stock (int): Units available, >= 0
        description (str): Optional description
        classroom (UUID): Optional classroom scope
    """

    name = serializers.CharField(max_length=200)
    price = serializers.IntegerField(min_value=0, max_value=INTEGER_MAX)
    stock = serializers.IntegerField(min_value=0, max_value=INTEGER_MAX)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    classroom = serializers.UUIDField(required=False, allow_null=True, default=None)


class StockUpdateSerializer(serializers.Serializer):
    stock = serializers.IntegerField(min_value=0, max_value=INTEGER_MAX, error_messages={
        'min_value': 'Invalid stock',
        'max_value': 'Invalid stock',
        'invalid': 'Invalid stock',
        'required': 'Invalid stock',
        'null': 'Invalid stock',
    })


class ProductFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for product listing.

    Query Parameters:
        in_stock (bool): Only products with stock > 0
    """

    in_stock = serializers.BooleanField(required=False, default=False)


# =============================================================================
# Output Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    """Main serializer for products."""

    class Meta:
        model = Product
        fields = [
            'id',
            'name',
            'description',
            'price',
            'stock',
            'classroom',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
