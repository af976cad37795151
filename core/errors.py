"""Exception hierarchy shared by all pyhusky modules."""


class HuskyError(Exception):
    """Base para todos os erros do pyhusky."""
    pass


__all__ = ["HuskyError"]
