from django.conf import settings
from django.shortcuts import redirect, render


def home(request):
    """Logged-in users go straight to the booking flow."""
    if request.user.is_authenticated:
        return redirect(settings.LOGIN_REDIRECT_URL)
    return redirect('accounts:login')


def error_404(request, exception):
    return render(request, '404.html', status=404)


def error_500(request):
    return render(request, '500.html', status=500)
