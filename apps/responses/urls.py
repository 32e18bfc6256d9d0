from django.urls import path
from .views import SubmitResponseView, SurveyResponsesResetView

urlpatterns = [
    path("responses", SubmitResponseView.as_view(), name="response-submit"),
    path("surveys/<uuid:survey_id>/responses", SurveyResponsesResetView.as_view(), name="survey-responses-reset"),
]
