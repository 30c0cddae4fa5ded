from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.include_root_view = False
router.register(r'', views.ProductViewSet, basename='product')

urlpatterns = [
    # Product routes
    # GET    /api/products/              - List products (?classroom=, ?in_stock=)
    # POST   /api/products/              - Create product
    # GET    /api/products/{id}/         - Get product
    # DELETE /api/products/{id}/         - Delete product
    # POST   /api/products/{id}/stock/   - Set stock
    path('', include(router.urls)),
]
