from django.urls import path

from funds.views import FundNavUpdateView, FundRegistrationView

urlpatterns = [
    path("funds", FundRegistrationView.as_view(), name="fund-register"),
    path("funds/<str:fund_id>", FundNavUpdateView.as_view(), name="fund-nav-update"),
]
