"""Domain outcomes and programming-contract errors.

Domain failures are values: the optimizer returns a SearchFailure instead of
raising. Exceptions are reserved for callers breaking a contract.
"""
from enum import Enum, unique

from pydantic import BaseModel, ConfigDict

from eqcalc.constants import ELEMENT_MISMATCH_MESSAGE, INVALID_COMBINATION_MESSAGE


@unique
class ErrorKind(str, Enum):
    ELEMENT_MISMATCH    = "ELEMENT_MISMATCH"
    INVALID_COMBINATION = "INVALID_COMBINATION"


class SearchFailure(BaseModel):
    """One of the two domain failure kinds, with its fixed message."""
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    @classmethod
    def element_mismatch(cls) -> "SearchFailure":
        return cls(kind=ErrorKind.ELEMENT_MISMATCH, message=ELEMENT_MISMATCH_MESSAGE)

    @classmethod
    def invalid_combination(cls) -> "SearchFailure":
        return cls(kind=ErrorKind.INVALID_COMBINATION, message=INVALID_COMBINATION_MESSAGE)


class EquipmentError(Exception):
    """Base class for contract violations inside eqcalc."""


class ElementConflictError(EquipmentError, ValueError):
    """combine() was called on a group of incompatible elements."""


class CatalogContractError(EquipmentError):
    """A catalog snapshot does not start every slot with the sentinel item."""
