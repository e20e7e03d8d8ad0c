"""
NFT Registry API

A controller-administered metadata registry for NFT and token canisters.
Anyone may read entries; only the current controller may add or remove them.
"""

__version__ = "1.0.0"
