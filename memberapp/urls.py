# memberapp/urls.py
from django.urls import path

from memberapp import views

urlpatterns = [
    # ===================== MEMBER ROUTES =====================
    path("join/", views.join, name="join"),
    path("login/", views.member_login, name="member_login"),
    path("profile/<str:member_code>/", views.profile, name="profile"),

    # ===================== DOWNLINE (BFS) =====================
    path("downline/left/<str:member_code>/", views.downline_left, name="downline_left"),
    path("downline/right/<str:member_code>/", views.downline_right, name="downline_right"),
    path(
        "downline/<str:side>/<str:member_code>/export/",
        views.export_downline_excel,
        name="export_downline_excel",
    ),
]
