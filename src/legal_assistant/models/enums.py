"""
Enumerations for Legal Assistant data models.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum
from typing import Optional


class LegalCategory(str, Enum):
    """
    Areas of Spanish law handled by the firm.

    Single-label: each question gets exactly one category. CIVIL doubles as
    the fallback when the model answers with something outside the taxonomy.
    """

    CIVIL = "Civil"
    PENAL = "Penal"
    LABORAL = "Laboral"
    ADMINISTRATIVO = "Administrativo"
    MERCANTIL = "Mercantil"
    FAMILIA = "Familia"
    TRIBUTARIO = "Tributario"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["LegalCategory"]:
        """Case-insensitive lookup; None when the value is not a known category."""
        if not value:
            return None
        needle = value.strip().lower()
        for category in cls:
            if category.value.lower() == needle:
                return category
        return None

    @classmethod
    def default(cls) -> "LegalCategory":
        return cls.CIVIL


class ComplexityEnum(str, Enum):
    """
    How involved the case looks to the model.

    Ordered from simple to complex.
    """

    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"
