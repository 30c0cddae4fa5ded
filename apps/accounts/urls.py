from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'accounts'

router = DefaultRouter()
router.include_root_view = False
router.register(r'students', views.AccountViewSet, basename='student')

urlpatterns = [
    # Login
    # POST   /api/login/                          - Resolve a login code

    # Student routes
    # GET    /api/students/                       - List students (?classroom=)
    # POST   /api/students/                       - Create student
    # GET    /api/students/{code}/                - Get student
    # DELETE /api/students/{code}/                - Delete student (cascade)
    # POST   /api/students/{code}/adjust-balance/ - Add signed amount
    # POST   /api/students/{code}/set-balance/    - Overwrite balance
    # POST   /api/students/my-balance/            - Balance by code
    path('login/', views.login, name='login'),

    path('', include(router.urls)),
]
