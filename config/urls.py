from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls), #admin

    path('', include('pages.urls')), #contact form
    path('users/', include('users.urls')), #email verification, password reset
    path('', include('payments.urls', namespace='payments')), #checkout, payment-verification, api-key
]
