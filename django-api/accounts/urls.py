from django.urls import path

from accounts.handlers.views import MyProfileView, PhotoUploadView, SignUpView

urlpatterns = [
    path("auth/signup", SignUpView.as_view(), name="signup"),
    path("me/profile", MyProfileView.as_view(), name="my-profile"),
    path("photos", PhotoUploadView.as_view(), name="photo-upload"),
]
