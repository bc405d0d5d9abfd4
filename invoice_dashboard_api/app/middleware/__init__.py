from .auth import AuthorizationMiddleware

__all__ = ["AuthorizationMiddleware"]
