import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.guestbook.serializers import DashboardStatsSerializer
from apps.guestbook.serializers import GuestExportRowSerializer
from apps.guestbook.serializers import GuestListQuerySerializer
from apps.guestbook.serializers import GuestSerializer
from apps.guestbook.serializers import RSVPCreateSerializer
from apps.guestbook.serializers import ScopeSerializer
from apps.guestbook.views.base import BaseGuestbookAPIView
from apps.shared.auth.gateway import Action

logger = logging.getLogger(__name__)


@extend_schema(tags=['RSVP'])
class RSVPCreateAPIView(BaseGuestbookAPIView):
    """Public RSVP submission"""

    @extend_schema(request=RSVPCreateSerializer, responses={201: GuestSerializer})
    def post(self, request):
        self.authorize(Action.SUBMIT_RSVP)
        serializer = RSVPCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        guest = self.get_service().submit_rsvp(
            scope=self.resolve_scope(data),
            name=data['name'],
            attendance=data['attendance'],
            email=data.get('email'),
            phone=data.get('phone'),
            guest_count=data.get('guest_count'),
            message=data.get('message'),
        )
        return Response(GuestSerializer(guest).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Guests'])
class GuestListAPIView(BaseGuestbookAPIView):
    """
    Guests of one wedding, newest first.

    Owners default to their own wedding; without a wedding the global guest
    book is read, which only admins may do.
    """

    @extend_schema(parameters=[GuestListQuerySerializer], responses=GuestSerializer(many=True))
    def get(self, request):
        query = GuestListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        data = query.validated_data

        scope = self.resolve_scope(data, default_to_own=True)
        self.authorize(Action.LIST_GUESTS, tenant_id=scope.wedding_id)

        guests = self.get_service().list_guests(scope, search=data.get('search'), attendance=data.get('attendance'))
        return Response(GuestSerializer(guests, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Guests'])
class GuestExportAPIView(BaseGuestbookAPIView):
    """Flat guest rows for spreadsheet export"""

    @extend_schema(parameters=[ScopeSerializer], responses=GuestExportRowSerializer(many=True))
    def get(self, request):
        query = ScopeSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        scope = self.resolve_scope(query.validated_data, default_to_own=True)
        self.authorize(Action.EXPORT_GUESTS, tenant_id=scope.wedding_id)

        rows = self.get_service().export_guests_rows(scope)
        logger.info(f'{request.user} exported {len(rows)} guests from scope {scope}')
        return Response(GuestExportRowSerializer(rows, many=True).data, status=status.HTTP_200_OK)


@extend_schema(tags=['Dashboard'])
class DashboardAPIView(BaseGuestbookAPIView):
    @extend_schema(parameters=[ScopeSerializer], responses=DashboardStatsSerializer)
    def get(self, request):
        query = ScopeSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        scope = self.resolve_scope(query.validated_data, default_to_own=True)
        self.authorize(Action.VIEW_DASHBOARD, tenant_id=scope.wedding_id)

        stats = self.get_service().compute_dashboard_stats(scope)
        return Response(DashboardStatsSerializer(stats).data, status=status.HTTP_200_OK)
