"""
Helper Utilities
Common utility functions used across the application
"""

from typing import Any, List, Union
from datetime import date
from decimal import Decimal
import math
import uuid


class Helpers:
    """
    Collection of utility functions
    """

    @staticmethod
    def generate_id() -> str:
        """
        Generate random unique identifier

        Returns:
            UUID4 string (36 characters, hyphenated)
        """
        return str(uuid.uuid4())

    @staticmethod
    def get_today_date(fmt: str = "%d-%m-%Y") -> str:
        """
        Format today's local date

        Args:
            fmt: strftime format

        Returns:
            Formatted date, e.g. "18-10-2026"
        """
        return date.today().strftime(fmt)

    @staticmethod
    def is_finite_number(value: Union[Decimal, float, int]) -> bool:
        """Finite check that keeps Decimals out of float conversion"""
        if isinstance(value, Decimal):
            return value.is_finite()
        return math.isfinite(value)

    @staticmethod
    def count_decimal_places(value: Union[Decimal, float, int]) -> int:
        """
        Count significant fractional digits

        Args:
            value: Finite number

        Returns:
            0 for whole numbers, otherwise the digits after the point
            in the shortest string form of the value
        """
        if not Helpers.is_finite_number(value):
            raise ValueError(f"Cannot count decimal places of {value}")

        if round(value) == value:
            return 0

        # str() of a float is its shortest round-trip form; may use exponent notation
        exponent = Decimal(str(value)).normalize().as_tuple().exponent
        return max(0, -exponent)

    @staticmethod
    def create_list_with_values(*values: Any) -> List[Any]:
        """
        Build a new mutable list

        Args:
            values: Items to put in the list

        Returns:
            List of the values in order
        """
        return list(values)


# Global instance
helpers = Helpers()


# Convenience functions
def generate_id() -> str:
    """Generate random unique identifier"""
    return helpers.generate_id()


def get_today_date(fmt: str = "%d-%m-%Y") -> str:
    """Format today's local date"""
    return helpers.get_today_date(fmt)


def count_decimal_places(value: Union[Decimal, float, int]) -> int:
    """Count significant fractional digits"""
    return helpers.count_decimal_places(value)


def create_list_with_values(*values: Any) -> List[Any]:
    """Build a new mutable list"""
    return helpers.create_list_with_values(*values)
