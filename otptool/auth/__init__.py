"""Shared-secret handling: normalization, decoding, masking."""

from .secret import decode_secret, mask_secret, normalize_secret, pad_base32

__all__ = ["decode_secret", "mask_secret", "normalize_secret", "pad_base32"]
