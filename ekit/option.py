"""Helpers for the functional-options pattern."""


def apply(target, *options):
    """Call every option on ``target`` in order and return ``target``."""
    for option in options:
        option(target)
    return target


def apply_err(target, *options):
    """Call every option on ``target`` in order, stopping at the first failure.

    An option fails either by raising or by returning an exception instance,
    which is then raised. Options after a failing one are not called.
    """
    for option in options:
        result = option(target)
        if isinstance(result, BaseException):
            raise result
    return target