"""
Interactive yes/no confirmation.
"""

from typing import Callable, Optional

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("", "n", "no")


def confirm(
    message: str, input_func: Optional[Callable[[str], str]] = None
) -> bool:
    """Ask a yes/no question until the answer is understood.

    An empty answer or end of input counts as no.
    """
    read_answer = input_func or input
    while True:
        try:
            answer = read_answer(f"{message} [y/N] ").strip().lower()
        except EOFError:
            return False

        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
