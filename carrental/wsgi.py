"""
WSGI config for the Car Rental booking system.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'carrental.settings.production')

application = get_wsgi_application()
