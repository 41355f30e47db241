from django.urls import path

from apps.guestbook import views

app_name = 'guestbook'

urlpatterns = [
    # Public submissions
    path('rsvp', views.RSVPCreateAPIView.as_view(), name='rsvp'),  # POST
    path('wishes', views.WishListCreateAPIView.as_view(), name='wish-list'),  # GET, POST
    # Admin / owner
    path('wishes/<uuid:wish_id>', views.WishDetailAPIView.as_view(), name='wish-detail'),  # DELETE
    path('guests', views.GuestListAPIView.as_view(), name='guest-list'),  # GET
    path('guests/export', views.GuestExportAPIView.as_view(), name='guest-export'),  # GET
    path('admin/dashboard', views.DashboardAPIView.as_view(), name='dashboard'),  # GET
]
