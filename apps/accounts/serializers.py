from rest_framework import serializers

from apps.accounts.models import User
from apps.weddings.serializers import WeddingSummarySerializer


class LoginSerializer(serializers.Serializer):
    """Admins log in with their username, couples with their email"""

    identifier = serializers.CharField(max_length=255)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class UserSerializer(serializers.ModelSerializer):
    wedding = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ('id', 'email', 'name', 'is_active', 'wedding', 'created_at', 'updated_at')
        read_only_fields = fields

    def get_wedding(self, obj) -> dict | None:
        wedding = obj.owned_wedding
        return WeddingSummarySerializer(wedding).data if wedding else None


class UserCreateSerializer(serializers.Serializer):
    """
    Create a couple account. Giving ``slug`` and ``wedding_date`` also sets up
    the wedding with its default menu and events.
    """

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
    name = serializers.CharField(max_length=255)
    slug = serializers.CharField(max_length=100, required=False)
    wedding_date = serializers.DateField(required=False)

    def validate(self, attrs):
        if ('slug' in attrs) != ('wedding_date' in attrs):
            raise serializers.ValidationError('slug and wedding_date must be given together.')
        return attrs


class UserUpdateSerializer(serializers.Serializer):
    email = serializers.EmailField(required=False)
    name = serializers.CharField(max_length=255, required=False)
    password = serializers.CharField(write_only=True, required=False, trim_whitespace=False)
    is_active = serializers.BooleanField(required=False)


class ProfileSerializer(serializers.Serializer):
    kind = serializers.CharField()
    id = serializers.UUIDField()
    role = serializers.CharField()
    username = serializers.CharField(required=False)
    email = serializers.EmailField(required=False)
    name = serializers.CharField(required=False)
    wedding = serializers.DictField(allow_null=True)


class LoginResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    token_type = serializers.CharField()
    expires_in = serializers.IntegerField()
    profile = ProfileSerializer()
