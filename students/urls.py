from django.urls import path

from students.views import enrollments, records

urlpatterns = [
    path("students/", records.StudentListAPI.as_view(), name="api_students"),
    path("students/schedules/", records.student_schedules_view, name="api_student_schedules"),
    path("students/<int:pk>/", records.StudentDetailAPI.as_view(), name="api_student_detail"),

    path("schedules/<int:pk>/students/", enrollments.ScheduleStudentsAPI.as_view(), name="api_schedule_students"),
    path("enrollments/<int:pk>/", enrollments.EnrollmentDetailAPI.as_view(), name="api_enrollment_detail"),
]
