class InvalidInputError(ValueError):
    """User input rejected before it reaches rate lookup or conversion."""


class InvalidCurrencyError(InvalidInputError):
    pass


class InvalidAmountError(InvalidInputError):
    pass


class InvalidDateError(InvalidInputError):
    pass
