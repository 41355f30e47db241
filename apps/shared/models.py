from apps.shared.base.models import BlacklistedToken

__all__ = ['BlacklistedToken']
