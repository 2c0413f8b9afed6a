from django.urls import path

from trainers.views import records

urlpatterns = [
    path("trainers/", records.TrainerListAPI.as_view(), name="api_trainers"),
    path("trainers/schedules/", records.trainer_schedules_view, name="api_trainer_schedules"),
    path("trainers/<int:pk>/", records.TrainerDetailAPI.as_view(), name="api_trainer_detail"),
    path("trainers/<int:pk>/documents/", records.TrainerDocumentsAPI.as_view(), name="api_trainer_documents"),
    path(
        "trainers/<int:pk>/documents/<int:document_id>/",
        records.delete_document_view,
        name="api_trainer_document_delete",
    ),

    path("schedules/<int:pk>/trainers/", records.ScheduleTrainersAPI.as_view(), name="api_schedule_trainers"),
    path(
        "schedules/<int:pk>/trainers/<int:trainer_id>/",
        records.remove_schedule_trainer_view,
        name="api_schedule_trainer_remove",
    ),
]
