from django.urls import path

from courses.views import catalog, schedules

urlpatterns = [

    # ================= CATALOG =================

    path("courses/", catalog.CourseListAPI.as_view(), name="api_courses"),
    path("courses/<int:pk>/", catalog.CourseDetailAPI.as_view(), name="api_course_detail"),

    path("delivery-modes/", catalog.DeliveryModeListAPI.as_view(), name="api_delivery_modes"),
    path("delivery-modes/<int:pk>/", catalog.DeliveryModeDetailAPI.as_view(), name="api_delivery_mode_detail"),

    path("materials/", catalog.MaterialListAPI.as_view(), name="api_materials"),
    path("materials/<int:pk>/", catalog.MaterialDetailAPI.as_view(), name="api_material_detail"),


    # ================= SCHEDULES =================

    path("schedules/", schedules.ScheduleListAPI.as_view(), name="api_schedules"),
    path("schedules/preview-end-date/", schedules.preview_end_date_view, name="api_preview_end_date"),
    path("schedules/refresh-statuses/", schedules.refresh_statuses_view, name="api_refresh_statuses"),
    path("schedules/<int:pk>/", schedules.ScheduleDetailAPI.as_view(), name="api_schedule_detail"),
    path("schedules/<int:pk>/duplicate/", schedules.duplicate_schedule_view, name="api_schedule_duplicate"),
]
