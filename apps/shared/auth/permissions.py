"""
Shared Authentication Permissions

DRF permission classes for coarse checks on the principal kind. Tenant-level
decisions go through ``AccessGateway.authorize`` inside the views.
"""

from rest_framework.permissions import BasePermission


class IsAuthenticatedPrincipal(BasePermission):
    """Any admin or owner holding a valid token."""

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)


class IsAdminPrincipal(BasePermission):
    """Admins only; anonymous callers get 401, owners 403."""

    message = 'You do not have access to this resource'

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_admin)
