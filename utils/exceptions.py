"""
Validation Exceptions
Definitive rejections of caller input, translated to 4xx by the web layer
"""

from models.fields import FieldKey


class ValidationError(Exception):
    """Base class for rejected input"""

    kind = "validation_error"


class MissingFieldException(ValidationError):
    """A required field was absent or blank"""

    kind = "missing_field"

    def __init__(self, field_key: FieldKey):
        self.field_key = field_key
        super().__init__(f"Missing required field: {field_key.label}")


class InvalidInputException(ValidationError):
    """A field was present but failed a format, range or pattern rule"""

    kind = "invalid_input"

    def __init__(self, field_key: FieldKey):
        self.field_key = field_key
        super().__init__(f"Invalid value for field: {field_key.label}")


class ExistingProductException(ValidationError):
    """A product with the same name already exists"""

    kind = "existing_product"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Product already exists: {name}")
