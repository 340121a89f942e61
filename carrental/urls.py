"""
URL configuration for the Car Rental booking system.
"""
from django.contrib import admin
from django.conf import settings
from django.urls import path, include

urlpatterns = [
    path(settings.ADMIN_URL, admin.site.urls),
    path('', include('apps.pages.urls', namespace='pages')),
    path('', include('apps.accounts.urls', namespace='accounts')),
    path('', include('apps.bookings.urls', namespace='bookings')),
]

# Custom Error Handlers
handler404 = 'apps.pages.views.error_404'
handler500 = 'apps.pages.views.error_500'
