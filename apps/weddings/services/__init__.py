from apps.weddings.services.content_service import ContentService
from apps.weddings.services.tenant_service import TenantService

__all__ = [
    'ContentService',
    'TenantService',
]
