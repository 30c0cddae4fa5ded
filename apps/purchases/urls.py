from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'purchases'

router = DefaultRouter()
router.include_root_view = False
router.register(r'', views.PurchaseRequestViewSet, basename='purchase')

urlpatterns = [
    # Purchase request routes
    # GET    /api/purchases/                 - List requests (?classroom=, ?status=, ?student=)
    # POST   /api/purchases/                 - Create request
    # GET    /api/purchases/{id}/            - Get request
    # POST   /api/purchases/{id}/decide/     - Approve or reject
    # GET    /api/purchases/student/{code}/  - Requests of one student
    # DELETE /api/purchases/history/         - Purge requests in scope
    path('', include(router.urls)),
]
