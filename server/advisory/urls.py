from django.urls import path

from .views import AlignmentView, PlanningStatsView, ProjectionView

urlpatterns = [
    path("clients/stats", PlanningStatsView.as_view(), name="client-stats"),
    path("clients/<uuid:client_id>/projections", ProjectionView.as_view(), name="client-projection"),
    path("clients/<uuid:client_id>/alignment", AlignmentView.as_view(), name="client-alignment"),
]
