from django.urls import path

from apps.accounts import views

app_name = 'accounts'

urlpatterns = [
    # Authentication endpoints
    path('auth/login', views.LoginView.as_view(), name='login'),
    path('auth/logout', views.LogoutView.as_view(), name='logout'),
    path('auth/me', views.MeView.as_view(), name='me'),
    # Couple accounts (admin)
    path('users', views.UserListCreateView.as_view(), name='user-list'),
    path('users/<uuid:user_id>', views.UserDetailView.as_view(), name='user-detail'),
]
