# scheduling/conf.py
from django.conf import settings

DEFAULTS = {
    "DISPLAY_TIME_ZONE": "Australia/Brisbane",
    "REJECT_CONFLICTS": True,
    "STAFF_WRITE_REQUIRES_ADMIN": False,
}


def scheduler_setting(name):
    """
    Read one key of settings.SCHEDULER, falling back to DEFAULTS.
    Read on every call so override_settings() works in tests.
    """
    overrides = getattr(settings, "SCHEDULER", {}) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
