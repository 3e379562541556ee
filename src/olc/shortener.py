"""
Shortener — Укорачивание и восстановление кодов относительно reference point

- shorten: полный код + близкая точка → короткий код (удаляются 1..4 пары)
- recover: короткий код + близкая точка → ближайший полный код

Порог укорачивания: range < safety_factor * latitude_precision(2 * pairs).
Теоретическая граница 0.5 ячейки; 0.3 оставляет запас у границ ячеек.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext

from src.core.contracts.grammar import is_valid_code
from src.core.domain.code import Code
from src.core.errors import InvalidArgumentError, InvalidOperationError
from src.core.math.fixed_point import DECIMAL_CONTEXT, Numeric, to_decimal
from src.core.math.precision import (
    ENCODING_BASE,
    LATITUDE_MAX,
    SEPARATOR_POSITION,
    compute_latitude_precision,
)
from src.olc.decoder import decode_code
from src.olc.encoder import encode_code
from src.olc.normalizer import clip_latitude, normalize_longitude

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ShortenConfig:
    """Конфигурация укорачивания.

    - safety_factor: доля высоты ячейки, в пределах которой должна лежать
      reference point
    - max_pairs_removed: максимум удаляемых пар цифр (перебор от него к 1)
    """

    safety_factor: Decimal = Decimal("0.3")
    max_pairs_removed: int = 4


# =============================================================================
# SHORTENER
# =============================================================================


class CodeShortener:
    """Укорачивание полных кодов и восстановление коротких.

    Оба направления используют один и тот же reference point: код,
    укороченный около точки, восстанавливается около неё же.
    """

    def __init__(self, config: ShortenConfig | None = None):
        """
        Args:
            config: конфигурация укорачивания (опционально, используется default)
        """
        self.config = config or ShortenConfig()
        if not 1 <= self.config.max_pairs_removed <= SEPARATOR_POSITION // 2:
            raise InvalidArgumentError(
                f"max_pairs_removed must be in [1, {SEPARATOR_POSITION // 2}], "
                f"got {self.config.max_pairs_removed}"
            )

    def shorten(self, code: Code, reference_latitude: Numeric, reference_longitude: Numeric) -> Code:
        """
        Удаление максимально возможного числа ведущих пар цифр.

        Args:
            code: Полный, не padded код
            reference_latitude: Широта reference point
            reference_longitude: Долгота reference point

        Returns:
            Короткий Code

        Raises:
            InvalidOperationError: Если код short или padded
            InvalidArgumentError: Если reference point слишком далеко от центра
        """
        if not code.is_full:
            raise InvalidOperationError("shorten() method could only be called on a full code.")
        if code.is_padded:
            raise InvalidOperationError("shorten() method can not be called on a padded code.")

        ref_lat = to_decimal(reference_latitude, "reference_latitude")
        ref_lon = to_decimal(reference_longitude, "reference_longitude")

        area = decode_code(code)
        with localcontext(DECIMAL_CONTEXT):
            distance = max(
                abs(ref_lat - area.center_latitude),
                abs(ref_lon - area.center_longitude),
            )

            for pairs in range(self.config.max_pairs_removed, 0, -1):
                threshold = compute_latitude_precision(pairs * 2) * self.config.safety_factor
                candidate = code.value[pairs * 2:]
                # Удаление всех цифр до разделителя без суффикса даёт пустой код
                if distance < threshold and is_valid_code(candidate):
                    shortened = Code.parse(candidate)
                    logger.debug(
                        "Shortened %s to %s (range=%s, threshold=%s)",
                        code.value,
                        shortened.value,
                        distance,
                        threshold,
                    )
                    return shortened

        raise InvalidArgumentError("Reference location is too far from the Open Location Code center.")

    def recover(self, code: Code, reference_latitude: Numeric, reference_longitude: Numeric) -> Code:
        """
        Восстановление ближайшего к reference point полного кода.

        Полный код возвращается без изменений.

        Args:
            code: Короткий (или полный) код
            reference_latitude: Широта reference point
            reference_longitude: Долгота reference point

        Returns:
            Полный Code той же длины, что и код с восстановленным префиксом
        """
        if code.is_full:
            return code

        ref_lat = clip_latitude(reference_latitude)
        ref_lon = normalize_longitude(reference_longitude)

        digits_to_recover = SEPARATOR_POSITION - code.separator_index

        with localcontext(DECIMAL_CONTEXT):
            # Высота и ширина ячейки отсутствующего префикса в градусах
            prefix_precision = Decimal(ENCODING_BASE) ** (2 - digits_to_recover // 2)
            half_step = prefix_precision / 2

            # Префикс берётся из кода reference point
            prefix = encode_code(ref_lat, ref_lon).value[:digits_to_recover]
            recovered = Code.parse(prefix + code.value)
            area = decode_code(recovered)

            # Центр может отстоять от reference не более чем на один шаг
            recovered_lat = area.center_latitude
            recovered_lon = area.center_longitude

            latitude_diff = recovered_lat - ref_lat
            if latitude_diff > half_step and recovered_lat - prefix_precision > -LATITUDE_MAX:
                recovered_lat -= prefix_precision
            elif latitude_diff < -half_step and recovered_lat + prefix_precision < LATITUDE_MAX:
                recovered_lat += prefix_precision

            longitude_diff = recovered_lon - ref_lon
            if longitude_diff > half_step:
                recovered_lon -= prefix_precision
            elif longitude_diff < -half_step:
                recovered_lon += prefix_precision

        result = encode_code(recovered_lat, recovered_lon, recovered.code_length)
        logger.debug(
            "Recovered %s near (%s, %s) as %s",
            code.value,
            ref_lat,
            ref_lon,
            result.value,
        )
        return result
