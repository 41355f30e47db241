from rest_framework import serializers

from apps.guestbook.models import Guest
from apps.guestbook.models import Wish


class ScopeSerializer(serializers.Serializer):
    """
    Which guest book a request targets: a wedding by id or slug, or the
    global guest book when neither is given.
    """

    wedding_id = serializers.UUIDField(required=False, allow_null=True)
    slug = serializers.CharField(max_length=100, required=False, allow_blank=True)


class GuestListQuerySerializer(ScopeSerializer):
    search = serializers.CharField(required=False, allow_blank=True)
    attendance = serializers.ChoiceField(
        choices=[*Guest.Attendance.values, 'all'],
        required=False,
    )


class WishListQuerySerializer(ScopeSerializer):
    search = serializers.CharField(required=False, allow_blank=True)


class RSVPCreateSerializer(ScopeSerializer):
    name = serializers.CharField(max_length=255, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True, allow_null=True)
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    # Checked against the enum in the service so the error shape matches other RSVP errors
    attendance = serializers.CharField(max_length=20)
    guest_count = serializers.IntegerField(required=False, allow_null=True)
    message = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class WishCreateSerializer(ScopeSerializer):
    name = serializers.CharField(max_length=255, allow_blank=True)
    message = serializers.CharField(allow_blank=True)


class GuestSerializer(serializers.ModelSerializer):
    guest_count = serializers.IntegerField(source='effective_guest_count', read_only=True, allow_null=True)

    class Meta:
        model = Guest
        fields = ('id', 'wedding_id', 'name', 'email', 'phone', 'attendance', 'guest_count', 'message', 'created_at')
        read_only_fields = fields


class GuestExportRowSerializer(serializers.Serializer):
    name = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()
    attendance = serializers.CharField()
    guest_count = serializers.IntegerField(allow_null=True)
    message = serializers.CharField()
    created_at = serializers.DateTimeField()


class WishSerializer(serializers.ModelSerializer):
    class Meta:
        model = Wish
        fields = ('id', 'wedding_id', 'name', 'message', 'created_at')
        read_only_fields = fields


class DashboardStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    attending = serializers.IntegerField()
    not_attending = serializers.IntegerField()
    uncertain = serializers.IntegerField()
    total_wishes = serializers.IntegerField()
