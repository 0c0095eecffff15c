"""Declarative field catalog.

Field rule sets (postal code, username, email, ...) are data, kept as YAML
files under ``catalog/fields`` and checked against a JSON Schema.
"""

from smartfield.catalog.loader import (
    DEFAULT_CATALOG_PATH,
    FieldCatalog,
    FieldCatalogError,
    FieldDefinition,
    UnknownFieldError,
)
from smartfield.catalog.validator import (
    CatalogIssue,
    validate_catalog_dir,
    validate_field_file,
)

__all__ = [
    "CatalogIssue",
    "DEFAULT_CATALOG_PATH",
    "FieldCatalog",
    "FieldCatalogError",
    "FieldDefinition",
    "UnknownFieldError",
    "validate_catalog_dir",
    "validate_field_file",
]
