from apps.guestbook.views.guest_views import DashboardAPIView
from apps.guestbook.views.guest_views import GuestExportAPIView
from apps.guestbook.views.guest_views import GuestListAPIView
from apps.guestbook.views.guest_views import RSVPCreateAPIView
from apps.guestbook.views.wish_views import WishDetailAPIView
from apps.guestbook.views.wish_views import WishListCreateAPIView

__all__ = [
    'DashboardAPIView',
    'GuestExportAPIView',
    'GuestListAPIView',
    'RSVPCreateAPIView',
    'WishDetailAPIView',
    'WishListCreateAPIView',
]
