"""
Login, signup and logout views.
"""
import logging

from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme

from .exceptions import AuthenticationFailure, DuplicateEmail
from .forms import LoginForm, SignupForm
from .services import authenticate_user, logout_user, register_user

logger = logging.getLogger(__name__)

def _safe_next(request):
    next_url = request.POST.get('next', '') or request.GET.get('next', '')
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={request.get_host()}, require_https=request.is_secure(),
    ):
        return next_url
    return None


def login_view(request):
    if request.user.is_authenticated:
        return redirect(settings.LOGIN_REDIRECT_URL)

    error = None
    if request.method == 'POST':
        form = LoginForm(request.POST)
        if form.is_valid():
            try:
                authenticate_user(
                    request,
                    email=form.cleaned_data['email'],
                    password=form.cleaned_data['password'],
                )
            except AuthenticationFailure as exc:
                error = str(exc)
            else:
                return redirect(_safe_next(request) or settings.LOGIN_REDIRECT_URL)
        else:
            error = 'Invalid email or password'
    else:
        form = LoginForm()

    return render(request, 'accounts/login.html', {
        'form': form,
        'error': error,
        'next': request.POST.get('next') or request.GET.get('next', ''),
    })


def signup_view(request):
    if request.user.is_authenticated:
        return redirect(settings.LOGIN_REDIRECT_URL)

    error = None
    if request.method == 'POST':
        form = SignupForm(request.POST)
        if form.is_valid():
            try:
                register_user(
                    request,
                    name=form.cleaned_data['name'],
                    email=form.cleaned_data['email'],
                    password=form.cleaned_data['password'],
                )
            except DuplicateEmail as exc:
                error = str(exc)
            else:
                messages.success(request, 'Welcome aboard! Pick a location to start your booking.')
                return redirect(settings.LOGIN_REDIRECT_URL)
    else:
        form = SignupForm()

    return render(request, 'accounts/signup.html', {'form': form, 'error': error})


def logout_view(request):
    logout_user(request)
    return redirect('accounts:login')
