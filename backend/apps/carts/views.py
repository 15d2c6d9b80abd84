from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_cart_service
from .serializers import (
    CartReadSerializer,
    CartItemWriteSerializer,
    CheckoutResponseSerializer,
)

logger = get_logger(__name__).bind(component="carts", layer="view")

USER_ID_PARAMETER = OpenApiParameter("user_id", int, OpenApiParameter.PATH)


@extend_schema(tags=["Carts"])
class CartDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_cart_service()
    log = logger.bind(view="CartDetailView")

    @extend_schema(
        summary="Get cart",
        description="Returns the user's cart with its subtotal. Users without items get an empty cart.",
        parameters=[USER_ID_PARAMETER],
        responses={200: CartReadSerializer},
    )
    def get(self, request, user_id: int):
        self.log.debug("Fetching cart", user_id=user_id)
        cart = self.service.get_cart(user_id)
        return Response(CartReadSerializer(self.service.summarize(cart)).data)

    @extend_schema(
        summary="Clear cart",
        parameters=[USER_ID_PARAMETER],
        responses={204: None},
    )
    def delete(self, request, user_id: int):
        self.log.info("Clearing cart via API", user_id=user_id)
        self.service.clear_cart(user_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Carts"])
class CartItemListView(APIView):
    permission_classes = [AllowAny]
    service = build_cart_service()
    log = logger.bind(view="CartItemListView")

    @extend_schema(
        summary="Add item to cart",
        description=(
            "Adds a product to the user's cart. Adding a product already in the cart "
            "increases its quantity. The unit price is taken from the catalog."
        ),
        parameters=[USER_ID_PARAMETER],
        request=CartItemWriteSerializer,
        responses={
            201: CartReadSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, user_id: int):
        serializer = CartItemWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product_id = serializer.validated_data["product_id"]
        quantity = serializer.validated_data["quantity"]
        cart = self.service.add_item(user_id, product_id, quantity)
        self.log.info(
            "Item added via API",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
        )
        return Response(
            CartReadSerializer(self.service.summarize(cart)).data,
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Carts"])
class CartCheckoutView(APIView):
    permission_classes = [AllowAny]
    service = build_cart_service()
    log = logger.bind(view="CartCheckoutView")

    @extend_schema(
        summary="Checkout cart",
        description="Returns the cart subtotal and empties the cart.",
        parameters=[USER_ID_PARAMETER],
        request=None,
        responses={
            200: CheckoutResponseSerializer,
            409: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, user_id: int):
        result = self.service.checkout_summary(user_id)
        self.log.info("Checkout completed via API", user_id=user_id, total=result.total)
        return Response(CheckoutResponseSerializer(result).data)
