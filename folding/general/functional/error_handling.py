from typing import NoReturn


def throw(error: BaseException) -> NoReturn:
    """Raise `error` from expression position, e.g. the last branch of a conditional expression."""
    raise error
