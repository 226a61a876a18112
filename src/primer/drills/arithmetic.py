"""Integer drills: FizzBuzz, factorials, digit manipulation and checksums."""

from primer.domain.errors import DrillInputError

MIN_RADIX = 2
MAX_RADIX = 10


def fizzbuzz(num: int) -> int | str:
    """Return 'Fizz', 'Buzz', 'FizzBuzz' or ``num`` itself.

    Multiples of 3 give 'Fizz', multiples of 5 give 'Buzz' and multiples of
    both give 'FizzBuzz'; any other number is returned unchanged.

    Examples:
        >>> [fizzbuzz(n) for n in (2, 3, 5, 15)]
        [2, 'Fizz', 'Buzz', 'FizzBuzz']
    """
    if num % 15 == 0:
        return "FizzBuzz"
    if num % 5 == 0:
        return "Buzz"
    if num % 3 == 0:
        return "Fizz"
    return num


def factorial(n: int) -> int:
    """Return ``n!``.

    Raises:
        DrillInputError: If ``n`` is negative.
    """
    if n < 0:
        raise DrillInputError(f"Factorial is undefined for negative numbers: {n}")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def sum_between(n1: int, n2: int) -> int:
    """Return the sum of the integers from ``n1`` to ``n2`` inclusive.

    The bounds may be given in either order.
    """
    low, high = min(n1, n2), max(n1, n2)
    return (low + high) * (high - low + 1) // 2


def reverse_integer(num: int) -> int:
    """Return ``num`` with its digits reversed; the sign is kept."""
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def _digits(number: int | str) -> list[int]:
    text = str(number)
    if not (text.isascii() and text.isdigit()):
        raise DrillInputError(f"Expected a non-negative integer, got {number!r}")
    return [int(ch) for ch in text]


def is_credit_card_number(ccn: int | str) -> bool:
    """Validate a card number with the Luhn checksum.

    Starting from the rightmost digit, every second digit is doubled (minus 9
    when the product exceeds 9); the number is valid when the digit total is
    a multiple of 10.

    Args:
        ccn: The card number as an integer or a string of digits.

    Raises:
        DrillInputError: If ``ccn`` contains anything but digits.
    """
    total = 0
    for position, digit in enumerate(reversed(_digits(ccn))):
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def digital_root(num: int) -> int:
    """Sum the digits of ``num`` repeatedly until a single digit remains.

    Raises:
        DrillInputError: If ``num`` is negative.
    """
    root = num
    while root > 9:
        root = sum(_digits(root))
    if root < 0:
        raise DrillInputError(f"Digital root needs a non-negative integer: {num}")
    return root


def to_nary_string(num: int, radix: int) -> str:
    """Return the base-``radix`` representation of ``num``.

    Args:
        num: A non-negative integer.
        radix: Base between 2 and 10 inclusive.

    Raises:
        DrillInputError: If ``num`` is negative or ``radix`` is out of range.
    """
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise DrillInputError(
            f"Radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}"
        )
    if num < 0:
        raise DrillInputError(f"Expected a non-negative integer, got {num}")
    if num == 0:
        return "0"
    digits: list[str] = []
    while num:
        num, remainder = divmod(num, radix)
        digits.append(str(remainder))
    return "".join(reversed(digits))
