# niveau_lacs/web/urls.py

from django.urls import path

from niveau_lacs.web import views

urlpatterns = [
    path('', views.update_levels, name='update_levels'),
]
