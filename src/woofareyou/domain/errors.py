"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidFieldError(DomainError, ValueError):
    """Raised when a value object is built from a value violating its constraints."""

    def __init__(self, field: str, value: object, constraints: str) -> None:
        super().__init__(constraints)
        self.field = field
        self.value = value
        self.constraints = constraints


# ============================================================================
#                           Pet book errors
# ============================================================================


class DuplicatePetInBookError(DomainError):
    """Raised when an operation would leave two same pets in a pet book."""

    def __init__(self, pet_name: str, owner_name: str) -> None:
        super().__init__(f"Pet {pet_name} (owner {owner_name}) is already in the book.")
        self.pet_name = pet_name
        self.owner_name = owner_name


class PetNotFoundError(DomainError):
    """Raised when a pet expected in a pet book is not there."""

    def __init__(self, pet_name: str) -> None:
        super().__init__(f"Pet {pet_name} is not in the book.")
        self.pet_name = pet_name
