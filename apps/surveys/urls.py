from django.urls import path
from .views import SurveyListCreateView, SurveyAllListView, SurveyDetailView

urlpatterns = [
    path("surveys", SurveyListCreateView.as_view(), name="survey-list-create"),
    path("surveys/all", SurveyAllListView.as_view(), name="survey-list-all"),
    path("surveys/<uuid:survey_id>", SurveyDetailView.as_view(), name="survey-detail"),
]
