from django.urls import path
from . import views

# Video/question/category endpoints under /api/admin/ are routed by the catalog app
urlpatterns = [
    path('analytics/', views.analytics, name='admin-analytics'),
    path('students/', views.students, name='admin-students'),
    path('doubts/', views.doubts, name='admin-doubts'),
    path('doubts/<str:doubt_id>/', views.doubt_detail, name='admin-doubt-detail'),
]
