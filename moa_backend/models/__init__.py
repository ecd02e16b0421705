from .api_metadata import ApiMetadata, Contact, ServerEntry

# --------------------------------------------------------------------------- #

__all__ = ["ApiMetadata", "Contact", "ServerEntry"]
