from rest_framework import permissions


class IsStaffOrReadOnly(permissions.BasePermission):
    """
    Public site reads, admin dashboard writes.
    Safe methods are open to everyone; anything else needs a staff user.
    """
    message = "Administrator access is required for this action."

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)


class IsStaff(permissions.BasePermission):
    message = "Administrator access is required for this action."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_staff)
