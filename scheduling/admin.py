from django.contrib import admin
from .models import Event, Assignment


class AssignmentInline(admin.TabularInline):
    model = Assignment
    extra = 1
    autocomplete_fields = ("staff",)


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "event_type", "start", "end", "status", "completed_at")
    list_filter = ("event_type",)
    search_fields = ("title", "description")
    inlines = [AssignmentInline]


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ("event", "staff", "assigned_at")
    list_filter = ("staff",)
    search_fields = ("event__title", "staff__name")
