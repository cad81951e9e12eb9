# scheduling_system/urls.py
#
# Purpose:
# - Project URL router.
# - Keeps every JSON API under /api/ and the Django admin under /admin/.
#
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static


urlpatterns = [
    # Django admin
    path("admin/", admin.site.urls),

    # =====
    # API's
    # =====
    path("api/", include("scheduling.urls")),
    path("api/staff/", include("staff.urls")),
]

# Static files in DEBUG (dev only). In production, serve via web server / CDN.
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
