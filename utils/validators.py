"""
Input Validators
Validate product, login and account input before it is used
"""

import re
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional
from loguru import logger

from config import Settings, get_settings
from models.fields import FieldKey
from models.product import ProductCandidate
from security.passwords import PasswordHasher, password_too_long
from .exceptions import (
    MissingFieldException,
    InvalidInputException,
    ExistingProductException,
)
from .helpers import helpers

if TYPE_CHECKING:
    from services.inventory import InventoryLookup

# Lowercase, uppercase, digit and one of @$!%*?&, at least 8, nothing else
PASSWORD_PATTERN = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$', re.ASCII)

# Street, house number, postcode (1234 AB) and city
ADDRESS_PATTERN = re.compile(r'^[A-Za-z\s]+\d+[,\s]+\d{4}\s?[A-Z]{2}\s[A-Za-z\s]+$', re.ASCII)

MAX_PRICE_DECIMALS = 2

# Blank means only U+0000..U+0020; NBSP and other Unicode spaces are content
TRIM_CHARACTERS = "".join(chr(code) for code in range(0x21))


class Validation:
    """
    Validate various input types

    Configuration and the inventory used for uniqueness checks are passed in,
    so each instance can run with its own settings.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        inventory: Optional["InventoryLookup"] = None,
        hasher: Optional[PasswordHasher] = None,
    ):
        self.settings = settings or get_settings()
        self.inventory = inventory
        self.hasher = hasher or PasswordHasher(rounds=self.settings.BCRYPT_ROUNDS)

    @staticmethod
    def validate_not_empty(value: Optional[str], field_key: FieldKey) -> None:
        """
        Require a non-blank string

        Args:
            value: Input value
            field_key: Field the value belongs to

        Raises:
            MissingFieldException: value is None or only whitespace
        """
        if value is None or not value.strip(TRIM_CHARACTERS):
            logger.debug(f"Missing field: {field_key.value}")
            raise MissingFieldException(field_key)

    def validate_product(
        self,
        name: Optional[str],
        is_available: bool,
        ripening_date: Optional[str],
        season: Optional[str],
        stock: Optional[int],
        price: Any,
    ) -> None:
        """
        Validate a new product

        Checks name, ripening date and season presence, then stock, then
        price, then that no product with the same name exists.

        Raises:
            MissingFieldException: a required field is blank
            InvalidInputException: stock or price is out of range
            ExistingProductException: name is already in the inventory
        """
        self.validate_not_empty(name, FieldKey.PRODUCT_NAME)
        self.validate_not_empty(ripening_date, FieldKey.RIPENING_DATE)
        self.validate_not_empty(season, FieldKey.SEASON)
        self.validate_stock(stock)
        self.validate_price(price)

        if self.inventory is not None and self.inventory.find_product_by_name(name) is not None:
            logger.warning(f"Product already exists: {name}")
            raise ExistingProductException(name)

    def validate_product_candidate(self, candidate: ProductCandidate) -> None:
        """Validate a product candidate model"""
        self.validate_product(
            candidate.name,
            candidate.is_available,
            candidate.ripening_date,
            candidate.season,
            candidate.stock,
            candidate.price,
        )

    @staticmethod
    def validate_stock(stock: Optional[int]) -> None:
        """
        Validate stock count

        Args:
            stock: Units in stock

        Raises:
            MissingFieldException: stock is None
            InvalidInputException: stock is negative or not a whole number
        """
        if stock is None:
            raise MissingFieldException(FieldKey.STOCK)

        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            logger.debug(f"Invalid stock: {stock!r}")
            raise InvalidInputException(FieldKey.STOCK)

    @staticmethod
    def validate_price(price: Any) -> None:
        """
        Validate price

        Args:
            price: Price as int, float or Decimal

        Raises:
            MissingFieldException: price is None
            InvalidInputException: price is negative, NaN, infinite, not a
                number or has more than two decimals
        """
        if price is None:
            raise MissingFieldException(FieldKey.PRODUCT_PRICE)

        if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
            logger.debug(f"Invalid price type: {type(price).__name__}")
            raise InvalidInputException(FieldKey.PRODUCT_PRICE)

        if (
            not helpers.is_finite_number(price)
            or price < 0
            or helpers.count_decimal_places(price) > MAX_PRICE_DECIMALS
        ):
            logger.debug(f"Invalid price: {price!r}")
            raise InvalidInputException(FieldKey.PRODUCT_PRICE)

    @staticmethod
    def is_valid_password(password: Optional[str]) -> bool:
        """
        Check password against the password policy

        Args:
            password: Password to check

        Returns:
            True if valid
        """
        if password is None:
            return False
        return PASSWORD_PATTERN.fullmatch(password) is not None

    def validate_login(self, username: Optional[str], password: Optional[str]) -> None:
        """
        Validate login credentials

        Args:
            username: Username
            password: Password

        Raises:
            MissingFieldException: username or password is blank
            InvalidInputException: password fails the policy while
                PASSWORD_CREATE_PATTERN is enabled, or is longer than
                bcrypt can hash
        """
        self.validate_not_empty(username, FieldKey.USERNAME)
        self.validate_not_empty(password, FieldKey.PASSWORD)

        if password_too_long(password):
            logger.debug(f"Password too long for user: {username}")
            raise InvalidInputException(FieldKey.PASSWORD)

        if self.settings.PASSWORD_CREATE_PATTERN and not self.is_valid_password(password):
            logger.debug(f"Password does not match policy for user: {username}")
            raise InvalidInputException(FieldKey.PASSWORD)

    def validate_account_creation(self, username: Optional[str], password: Optional[str]) -> None:
        """Validate new account credentials (same rules as login)"""
        self.validate_login(username, password)

    def encode_password(self, password: str) -> str:
        """Hash password using bcrypt"""
        return self.hasher.hash(password)

    def check_encoded_password(self, password: str, encoded_password: str) -> bool:
        """Verify password against hash"""
        return self.hasher.verify(password, encoded_password)

    @staticmethod
    def generate_id() -> str:
        """Generate random unique identifier"""
        return helpers.generate_id()

    def get_today_date(self) -> str:
        """Today's date in the configured format (dd-MM-yyyy by default)"""
        return helpers.get_today_date(self.settings.DATE_FORMAT)

    @staticmethod
    def is_valid_address_format(address: Optional[str]) -> bool:
        """
        Validate address format

        Args:
            address: Address, e.g. "Main Street 12, 1234 AB Amsterdam"

        Returns:
            True if valid format
        """
        if address is None:
            return False
        return ADDRESS_PATTERN.fullmatch(address) is not None


# Global instance
validation = Validation()


# Convenience functions
# No validate_product here: the global instance has no inventory to check names against
def validate_not_empty(value: Optional[str], field_key: FieldKey) -> None:
    """Require a non-blank string"""
    validation.validate_not_empty(value, field_key)


def validate_stock(stock: Optional[int]) -> None:
    """Validate stock count"""
    validation.validate_stock(stock)


def validate_price(price: Any) -> None:
    """Validate price"""
    validation.validate_price(price)


def validate_login(username: Optional[str], password: Optional[str]) -> None:
    """Validate login credentials"""
    validation.validate_login(username, password)


def validate_account_creation(username: Optional[str], password: Optional[str]) -> None:
    """Validate new account credentials"""
    validation.validate_account_creation(username, password)


def encode_password(password: str) -> str:
    """Hash password using bcrypt"""
    return validation.encode_password(password)


def check_encoded_password(password: str, encoded_password: str) -> bool:
    """Verify password against hash"""
    return validation.check_encoded_password(password, encoded_password)


def is_valid_address_format(address: Optional[str]) -> bool:
    """Validate address format"""
    return validation.is_valid_address_format(address)


def is_valid_password(password: Optional[str]) -> bool:
    """Check password against the password policy"""
    return validation.is_valid_password(password)


def generate_id() -> str:
    """Generate random unique identifier"""
    return validation.generate_id()


def get_today_date() -> str:
    """Today's date in the configured format"""
    return validation.get_today_date()
