"""
Open Location Code — кодирование координат в короткие коды и обратно.

Публичные операции:
- encode / decode / decode_contract
- is_valid / is_full / is_short / is_padded / is_full_code / is_short_code
- shorten / recover / contains
"""

from src.core.contracts.grammar import CodeKind
from src.core.domain import Code, CodeArea
from src.core.errors import (
    CodeGrammarError,
    InvalidArgumentError,
    InvalidOperationError,
    OpenLocationCodeError,
)
from src.olc.api import (
    contains,
    decode,
    decode_contract,
    encode,
    is_full,
    is_full_code,
    is_padded,
    is_short,
    is_short_code,
    is_valid,
    recover,
    shorten,
)
from src.olc.decoder import decode_code
from src.olc.encoder import encode_code
from src.olc.normalizer import (
    adjust_pole_latitude,
    clip_latitude,
    normalize_longitude,
    parse_coordinates,
)
from src.olc.shortener import CodeShortener, ShortenConfig

__all__ = [
    # Models
    "Code",
    "CodeArea",
    "CodeKind",
    # Errors
    "OpenLocationCodeError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "CodeGrammarError",
    # String API
    "encode",
    "decode",
    "decode_contract",
    "is_valid",
    "is_full",
    "is_short",
    "is_padded",
    "is_full_code",
    "is_short_code",
    "shorten",
    "recover",
    "contains",
    # Normalizer
    "clip_latitude",
    "normalize_longitude",
    "adjust_pole_latitude",
    "parse_coordinates",
    # Codec
    "encode_code",
    "decode_code",
    "CodeShortener",
    "ShortenConfig",
]
