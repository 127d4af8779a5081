# Admin session handling

from .admin_session import AdminSessionMiddleware, require_admin, optional_admin

__all__ = ["AdminSessionMiddleware", "require_admin", "optional_admin"]
