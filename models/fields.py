"""
Field Keys
Identifiers for the input fields a validation error can refer to
"""

import enum

class FieldKey(str, enum.Enum):
    """Input field enumeration"""
    PRODUCT_NAME = "product_name"
    RIPENING_DATE = "ripening_date"
    SEASON = "season"
    STOCK = "stock"
    PRODUCT_PRICE = "product_price"
    USERNAME = "username"
    PASSWORD = "password"

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'product price'"""
        return self.value.replace("_", " ")
