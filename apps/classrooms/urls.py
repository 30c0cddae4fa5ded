from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'classrooms'

# Router for ViewSets
router = DefaultRouter(trailing_slash=True)
router.include_root_view = False
router.register(r'classrooms', views.ClassroomViewSet, basename='classroom')
router.register(r'teachers', views.TeacherViewSet, basename='teacher')

urlpatterns = [
    # Classroom routes
    # GET    /api/classrooms/          - List classrooms
    # POST   /api/classrooms/          - Create classroom
    # GET    /api/classrooms/{id}/     - Get classroom
    # DELETE /api/classrooms/{id}/     - Delete classroom (cascade)

    # Teacher routes
    # GET    /api/teachers/            - List teachers (?classroom=)
    # POST   /api/teachers/            - Create teacher
    # DELETE /api/teachers/{id}/       - Delete teacher

    # Include router URLs
    path('', include(router.urls)),
]
