from django.urls import path
from .views import CartDetailView, CartItemListView, CartCheckoutView

urlpatterns = [
    path("<int:user_id>/", CartDetailView.as_view(), name="api-carts-detail"),
    path("<int:user_id>/items/", CartItemListView.as_view(), name="api-carts-items"),
    path(
        "<int:user_id>/checkout/",
        CartCheckoutView.as_view(),
        name="api-carts-checkout",
    ),
]
