"""
CodeArea — Область, соответствующая декодированному коду

Immutable Pydantic модель: прямоугольник south/west (включительно) до
north/east (исключительно) в десятичных градусах, плюс производный центр.

Создаётся только Decoder; после создания не изменяется.
"""

from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from src.core.math.fixed_point import DECIMAL_CONTEXT, Numeric, to_decimal


# =============================================================================
# CODE AREA MODEL
# =============================================================================


class CodeArea(BaseModel):
    """
    Координаты декодированного кода.

    Включает широту и долготу нижнего левого и верхнего правого углов
    и центр прямоугольника.
    """

    south: Decimal = Field(..., ge=-90, le=90, description="Южная граница (градусы широты)")
    west: Decimal = Field(..., ge=-180, le=180, description="Западная граница (градусы долготы)")
    north: Decimal = Field(..., ge=-90, le=90, description="Северная граница (градусы широты)")
    east: Decimal = Field(..., ge=-180, le=180, description="Восточная граница (градусы долготы)")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "CodeArea":
        """Проверка south <= north и west <= east."""
        if self.south > self.north:
            raise ValueError(f"south {self.south} exceeds north {self.north}")
        if self.west > self.east:
            raise ValueError(f"west {self.west} exceeds east {self.east}")
        return self

    @property
    def center_latitude(self) -> Decimal:
        """Широта центра."""
        return DECIMAL_CONTEXT.divide(self.south + self.north, 2)

    @property
    def center_longitude(self) -> Decimal:
        """Долгота центра."""
        return DECIMAL_CONTEXT.divide(self.west + self.east, 2)

    @property
    def latitude_height(self) -> Decimal:
        return self.north - self.south

    @property
    def longitude_width(self) -> Decimal:
        return self.east - self.west

    def contains(self, latitude: Numeric, longitude: Numeric) -> bool:
        """
        Проверка, попадает ли точка в область.

        Граница south/west включена, north/east исключена.

        Args:
            latitude: Широта точки
            longitude: Долгота точки

        Returns:
            True если south <= lat < north и west <= lon < east
        """
        lat = to_decimal(latitude, "latitude")
        lon = to_decimal(longitude, "longitude")
        return self.south <= lat < self.north and self.west <= lon < self.east

    def to_contract(self) -> Dict[str, Any]:
        """
        Внешнее представление области (контракт code_area).

        Returns:
            dict с ключами south, west, north, east, centerLat, centerLon (float)
        """
        return {
            "south": float(self.south),
            "west": float(self.west),
            "north": float(self.north),
            "east": float(self.east),
            "centerLat": float(self.center_latitude),
            "centerLon": float(self.center_longitude),
        }
