from django.urls import path
from .views import SurveyResultsView, SurveyStatsView, OverviewView, SurveyExportView


urlpatterns = [
    path("surveys/<uuid:survey_id>/results", SurveyResultsView.as_view(), name="survey-results"),
    path("surveys/<uuid:survey_id>/stats", SurveyStatsView.as_view(), name="survey-stats"),
    path("surveys/<uuid:survey_id>/export", SurveyExportView.as_view(), name="survey-export"),
    path("stats", OverviewView.as_view(), name="overview-stats"),
]
