"""Protocol interfaces for nft_storage components."""

from nft_storage.interfaces.storage import PinningStorage

__all__ = ["PinningStorage"]
