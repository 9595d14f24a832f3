class DomainError(ValueError):
    """Raised in strict mode when a formula is evaluated outside its domain."""
