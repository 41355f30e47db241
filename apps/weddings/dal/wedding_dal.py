from typing import Any
from typing import Optional

from django.db.models import QuerySet

from apps.shared.decorators.database import handle_db_errors
from apps.weddings.models import Wedding


class WeddingDAL:
    """Data Access Layer for Wedding (tenant) rows"""

    @handle_db_errors(operation_type='create', model_name='Wedding', unique_fields=('slug', 'user'))
    def create_wedding(self, wedding_data: dict[str, Any]) -> Wedding:
        return Wedding.objects.create(**wedding_data)

    @handle_db_errors(operation_type='read', model_name='Wedding')
    def get_by_id(self, wedding_id) -> Wedding:
        return Wedding.objects.get(id=wedding_id)

    @handle_db_errors(operation_type='read', model_name='Wedding')
    def find_by_id(self, wedding_id) -> Optional[Wedding]:
        return Wedding.objects.filter(id=wedding_id).first()

    @handle_db_errors(operation_type='read', model_name='Wedding')
    def find_active_by_slug(self, slug: str) -> Optional[Wedding]:
        return Wedding.objects.active().by_slug(slug).first()

    @handle_db_errors(operation_type='read', model_name='Wedding')
    def find_by_owner(self, user_id) -> Optional[Wedding]:
        return Wedding.objects.for_owner(user_id).first()

    @handle_db_errors(operation_type='read', model_name='Wedding')
    def slug_exists(self, slug: str) -> bool:
        return Wedding.objects.by_slug(slug).exists()

    @handle_db_errors(operation_type='read', model_name='Wedding')
    def owner_exists(self, user_id) -> bool:
        return Wedding.objects.for_owner(user_id).exists()

    @handle_db_errors(operation_type='read', model_name='Wedding')
    def is_active(self, wedding_id) -> bool:
        return Wedding.objects.active().filter(id=wedding_id).exists()

    def get_active_weddings_queryset(self) -> QuerySet[Wedding]:
        return Wedding.objects.active().newest_first()

    @handle_db_errors(operation_type='update', model_name='Wedding')
    def update_wedding(self, wedding: Wedding, validated_data: dict[str, Any]) -> Wedding:
        for field, value in validated_data.items():
            setattr(wedding, field, value)
        wedding.save(update_fields=[*validated_data.keys(), 'updated_at'])
        return wedding

    @handle_db_errors(operation_type='delete', model_name='Wedding')
    def delete_wedding(self, wedding: Wedding) -> bool:
        wedding.delete()
        return True
