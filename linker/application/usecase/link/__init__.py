"""Link status use cases."""

from .get_link_status import GetLinkStatusResponse, GetLinkStatusUseCase

__all__ = ["GetLinkStatusResponse", "GetLinkStatusUseCase"]
