from django import forms
from apps.fleet.models import Car, InsuranceOption, Location


class DateRangeMixin:
    """Rejects ranges that end before they start. Same-day is allowed."""

    def clean(self):
        cleaned = super().clean()
        start, end = cleaned.get('start_date'), cleaned.get('end_date')
        if start and end and end < start:
            self.add_error('end_date', 'Return date cannot be before the pick-up date.')
        return cleaned


class LocationStepForm(DateRangeMixin, forms.Form):
    location_id = forms.ModelChoiceField(
        queryset=Location.objects.filter(is_active=True),
        label='Pick-up Location',
        empty_label='Choose a location',
        error_messages={'invalid_choice': 'Please select a valid location.'},
        widget=forms.Select(attrs={'class': 'form-control'}),
    )
    start_date = forms.DateField(
        label='Pick-up Date',
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
    )
    end_date = forms.DateField(
        label='Return Date',
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
    )


class ReservationEditForm(DateRangeMixin, forms.Form):
    """
    Accessories are not a form field: the view reads them with getlist()
    so unknown ids are dropped instead of failing validation.
    """
    car_id = forms.ModelChoiceField(
        queryset=Car.objects.none(),
        label='Car',
        empty_label=None,
        widget=forms.Select(attrs={'class': 'form-control'}),
    )
    insurance_id = forms.ModelChoiceField(
        queryset=InsuranceOption.objects.filter(is_active=True),
        required=False,
        label='Insurance',
        empty_label='No insurance',
        widget=forms.Select(attrs={'class': 'form-control'}),
    )
    start_date = forms.DateField(
        label='Pick-up Date',
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
    )
    end_date = forms.DateField(
        label='Return Date',
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}),
    )

    def __init__(self, *args, location=None, **kwargs):
        super().__init__(*args, **kwargs)
        cars = Car.objects.filter(is_active=True)
        if location is not None:
            cars = cars.filter(location=location)
        self.fields['car_id'].queryset = cars
