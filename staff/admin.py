# staff/admin.py
from django.contrib import admin
from .models import StaffMember


@admin.register(StaffMember)
class StaffMemberAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "designation")
    search_fields = ("name", "email", "designation")
