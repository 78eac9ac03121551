from django.urls import path
from . import views

app_name = 'payments'

urlpatterns = [
    # creates a Razorpay order for the cart amount
    path('checkout', views.checkout, name='checkout'),

    # post-payment callback: signature, payment record, vendor credit
    path('payment-verification', views.payment_verification, name='payment_verification'),

    # public key id for Razorpay Checkout on the storefront
    path('api-key', views.api_key, name='api_key'),
]
