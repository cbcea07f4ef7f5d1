from django.urls import path

from accounts.views import OrderCreateView

urlpatterns = [
    path("funds/order", OrderCreateView.as_view(), name="order-create"),
]
