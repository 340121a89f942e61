from django.contrib import admin
from .models import Reservation, ReservationAccessory


class ReservationAccessoryInline(admin.TabularInline):
    model = ReservationAccessory
    extra = 0
    autocomplete_fields = ['accessory']


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = [
        'short_id', 'user', 'location', 'car', 'insurance',
        'start_date', 'end_date', 'total_price', 'created_at',
    ]
    list_filter = ['location', 'start_date']
    search_fields = ['user__email', 'car__make', 'car__model', 'location__branch_name']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'start_date'
    inlines = [ReservationAccessoryInline]
    fieldsets = (
        ('Reservation', {'fields': ('id', 'user', 'location', 'car', 'insurance')}),
        ('Dates', {'fields': ('start_date', 'end_date')}),
        ('Pricing', {'fields': ('total_price',)}),
        ('Audit', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    def short_id(self, obj):
        return obj.id_short
    short_id.short_description = 'ID'
