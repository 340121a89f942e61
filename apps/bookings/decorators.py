"""
Wizard step gate.

    @wizard_step(Step.PAYMENT)
    def payment(request, draft): ...

Loads the session draft, checks the step's prerequisite and either calls
the view with the draft or redirects back to the step that has to be
completed first.
"""
from functools import wraps
from django.shortcuts import redirect

from .exceptions import PrerequisiteMissing
from .session import SessionDraftStore
from .wizard import check_prerequisites


def wizard_step(step):
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            draft = SessionDraftStore.for_request(request).get()
            try:
                check_prerequisites(draft, step)
            except PrerequisiteMissing as exc:
                return redirect(exc.step.url_name)
            return view_func(request, draft, *args, **kwargs)
        return wrapper
    return decorator
