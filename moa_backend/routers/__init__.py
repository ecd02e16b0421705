from .root import core_router, root_router

# --------------------------------------------------------------------------- #

__all__ = ["core_router", "root_router"]
