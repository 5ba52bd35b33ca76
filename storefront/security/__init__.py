# Access control

from .admin import AdminContext, AdminDependency, require_admin, display_mode

__all__ = ["AdminContext", "AdminDependency", "require_admin", "display_mode"]
