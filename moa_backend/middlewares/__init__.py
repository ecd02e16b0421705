from .add_process_time import AddProcessTimeMiddleware
from .catch_unhandled_error import CatchUnhandledErrorMiddleware

# --------------------------------------------------------------------------- #

__all__ = ["AddProcessTimeMiddleware", "CatchUnhandledErrorMiddleware"]
