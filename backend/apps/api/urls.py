from django.urls import path, include

urlpatterns = [
    path("auth/", include("apps.auth.urls")),
    path("users/", include("apps.users.urls")),
    path("products/", include("apps.catalog.urls")),
    path("carts/", include("apps.carts.urls")),
]
