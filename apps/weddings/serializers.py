"""
Wedding serializers: request validation and response shapes.

Input serializers only check types and formats; business rules (slug format,
uniqueness, menu order permutation) live in the services.
"""

from rest_framework import serializers

from apps.weddings.models import Event
from apps.weddings.models import GalleryPhoto
from apps.weddings.models import MenuConfig
from apps.weddings.models import Wedding

# =============================================================================
# WEDDING SERIALIZERS
# =============================================================================


class WeddingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Wedding
        fields = [
            'id',
            'user_id',
            'slug',
            'couple_name',
            'wedding_date',
            'theme',
            'primary_color',
            'secondary_color',
            'font_family',
            'is_active',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class WeddingSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Wedding
        fields = ['id', 'slug', 'couple_name', 'wedding_date', 'is_active']
        read_only_fields = fields


class WeddingCreateSerializer(serializers.Serializer):
    user_id = serializers.UUIDField(required=False)
    slug = serializers.CharField(max_length=100)
    couple_name = serializers.CharField(max_length=255)
    wedding_date = serializers.DateField()
    theme = serializers.CharField(max_length=50, required=False)
    primary_color = serializers.CharField(max_length=50, required=False)
    secondary_color = serializers.CharField(max_length=50, required=False)
    font_family = serializers.CharField(max_length=100, required=False)


class WeddingThemeSerializer(serializers.Serializer):
    theme = serializers.CharField(max_length=50)
    primary_color = serializers.CharField(max_length=50)
    secondary_color = serializers.CharField(max_length=50)
    font_family = serializers.CharField(max_length=100, required=False)


class WeddingDetailsSerializer(serializers.Serializer):
    couple_name = serializers.CharField(max_length=255, required=False)
    wedding_date = serializers.DateField(required=False)
    is_active = serializers.BooleanField(required=False)


# =============================================================================
# MENU SERIALIZERS
# =============================================================================


class MenuConfigSerializer(serializers.ModelSerializer):
    navigation = serializers.SerializerMethodField()

    class Meta:
        model = MenuConfig
        fields = [
            'show_home',
            'show_details',
            'show_rsvp',
            'show_gallery',
            'show_wishes',
            'custom_order',
            'navigation',
        ]
        read_only_fields = fields

    def get_navigation(self, obj) -> list[str]:
        return obj.navigation()


class MenuConfigUpdateSerializer(serializers.Serializer):
    show_home = serializers.BooleanField(required=False)
    show_details = serializers.BooleanField(required=False)
    show_rsvp = serializers.BooleanField(required=False)
    show_gallery = serializers.BooleanField(required=False)
    show_wishes = serializers.BooleanField(required=False)
    custom_order = serializers.CharField(max_length=100, required=False)


# =============================================================================
# EVENT SERIALIZERS
# =============================================================================


class EventSerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = [
            'id',
            'wedding_id',
            'type',
            'date',
            'time',
            'location',
            'address',
            'map_url',
            'image_url',
            'is_active',
            'order',
            'created_at',
        ]
        read_only_fields = fields


class EventCreateSerializer(serializers.Serializer):
    type = serializers.CharField(max_length=50)
    date = serializers.DateField()
    time = serializers.CharField(max_length=100)
    location = serializers.CharField(max_length=255)
    address = serializers.CharField()
    map_url = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    order = serializers.IntegerField(required=False, default=0)


class EventUpdateSerializer(EventCreateSerializer):
    is_active = serializers.BooleanField(required=False)

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('partial', True)
        super().__init__(*args, **kwargs)


# =============================================================================
# GALLERY SERIALIZERS
# =============================================================================


class GalleryPhotoSerializer(serializers.ModelSerializer):
    class Meta:
        model = GalleryPhoto
        fields = ['id', 'wedding_id', 'image_url', 'caption', 'order', 'is_active', 'created_at']
        read_only_fields = fields


class GalleryPhotoCreateSerializer(serializers.Serializer):
    """Either ``image_url`` or a ``storage_key`` to derive it from"""

    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    caption = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)
    order = serializers.IntegerField(required=False, default=0)
    storage_key = serializers.CharField(max_length=500, required=False, allow_blank=True, allow_null=True)


# =============================================================================
# PUBLIC PAGE
# =============================================================================


class WeddingPageSerializer(serializers.Serializer):
    wedding = WeddingSerializer()
    events = EventSerializer(many=True)
    gallery = GalleryPhotoSerializer(many=True)
    menu_config = MenuConfigSerializer(allow_null=True)
    navigation = serializers.ListField(child=serializers.CharField())
