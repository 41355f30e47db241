from apps.accounts.views.auth_views import LoginView
from apps.accounts.views.auth_views import LogoutView
from apps.accounts.views.auth_views import MeView
from apps.accounts.views.user_views import UserDetailView
from apps.accounts.views.user_views import UserListCreateView

__all__ = [
    'LoginView',
    'LogoutView',
    'MeView',
    'UserDetailView',
    'UserListCreateView',
]
