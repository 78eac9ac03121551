from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('verify-email/', views.verify_email_view, name='verify_email'),

    # reset by the emailed link
    path('password-reset/', views.password_reset_request, name='password_reset'),
    path('password-reset/confirm/', views.password_reset_confirm, name='password_reset_confirm'),
]
