"""
Utilities Module
Validators, helpers, exceptions
"""

from .exceptions import (
    ValidationError,
    MissingFieldException,
    InvalidInputException,
    ExistingProductException,
)
from .validators import (
    Validation,
    validation,
    validate_not_empty,
    validate_stock,
    validate_price,
    validate_login,
    validate_account_creation,
    is_valid_password,
    encode_password,
    check_encoded_password,
    is_valid_address_format,
)
from .helpers import (
    generate_id,
    get_today_date,
    count_decimal_places,
    create_list_with_values,
)

__all__ = [
    "ValidationError",
    "MissingFieldException",
    "InvalidInputException",
    "ExistingProductException",
    "Validation",
    "validation",
    "validate_not_empty",
    "validate_stock",
    "validate_price",
    "validate_login",
    "validate_account_creation",
    "is_valid_password",
    "encode_password",
    "check_encoded_password",
    "is_valid_address_format",
    "generate_id",
    "get_today_date",
    "count_decimal_places",
    "create_list_with_values",
]
