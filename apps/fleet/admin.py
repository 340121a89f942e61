from django.contrib import admin
from .models import Location, Car, InsuranceOption, Accessory


class CarInline(admin.TabularInline):
    model = Car
    extra = 0
    fields = ['make', 'model', 'seats', 'daily_price', 'is_active']


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ['branch_name', 'city', 'is_active']
    list_filter = ['city', 'is_active']
    search_fields = ['branch_name', 'city']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [CarInline]


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ['make', 'model', 'location', 'seats', 'daily_price', 'is_active']
    list_filter = ['location', 'is_active']
    search_fields = ['make', 'model', 'location__branch_name']
    list_editable = ['is_active', 'daily_price']
    readonly_fields = ['id', 'created_at', 'updated_at']
    fieldsets = (
        ('Car Info', {'fields': ('id', 'location', 'make', 'model', 'seats')}),
        ('Pricing', {'fields': ('daily_price',)}),
        ('Status', {'fields': ('is_active',)}),
        ('Audit', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )


@admin.register(InsuranceOption)
class InsuranceOptionAdmin(admin.ModelAdmin):
    list_display = ['name', 'price_per_day', 'is_active']
    list_editable = ['is_active', 'price_per_day']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(Accessory)
class AccessoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'price_flat', 'is_active']
    list_editable = ['is_active', 'price_flat']
    search_fields = ['name']
    readonly_fields = ['id', 'created_at', 'updated_at']
