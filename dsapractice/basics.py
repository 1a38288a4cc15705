"""Small classification and arithmetic exercises on integers and characters."""

from __future__ import annotations

import string

_VOWELS = frozenset("aeiou")

_WEEKDAYS = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend (truncating division)."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _single_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def sign_label(n: int) -> str:
    """Return "Positive", "Zero" or "Negative" for an integer."""
    if n > 0:
        return "Positive"
    if n == 0:
        return "Zero"
    return "Negative"


def is_odd(num: int) -> bool:
    """True when the truncated remainder of ``num`` by 2 is 1.

    Negative odd numbers leave a remainder of -1 and so are not reported odd.
    """
    return _trunc_mod(num, 2) == 1


def is_divisible_by_5(num: int) -> bool:
    """True when ``num`` is a multiple of 5."""
    return num % 5 == 0


def is_divisible_by_3_and_5(num: int) -> bool:
    """True when ``num`` is a multiple of both 3 and 5."""
    return num % 3 == 0 and num % 5 == 0


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def greater(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def greatest_of_three(a: int, b: int, c: int) -> int:
    """Return the largest of three numbers."""
    if a > b and a > c:
        return a
    return b if b > c else c


def temperature_range(temp: int) -> str:
    """Classify a temperature as "Cold", "Warm" or "Hot"."""
    if temp < 15:
        return "Cold"
    if temp < 35:
        return "Warm"
    return "Hot"


def is_vowel(ch: str) -> bool:
    """True when the character is a vowel, ignoring case."""
    return _single_char(ch).lower() in _VOWELS


def char_type(ch: str) -> str:
    """Classify an ASCII character as upper case, lower case, digit or other."""
    ch = _single_char(ch)
    if ch in string.ascii_uppercase:
        return "Uppercase"
    if ch in string.ascii_lowercase:
        return "Lowercase"
    if ch in string.digits:
        return "Digit"
    return "Special character"


def is_triangle(a: int, b: int, c: int) -> bool:
    """True when the three sides satisfy the triangle inequality strictly."""
    return a + b > c and a + c > b and b + c > a


def triangle_type(a: int, b: int, c: int) -> str:
    """Name the kind of triangle the sides form.

    Raises ValueError when the sides do not form a triangle.
    """
    if not is_triangle(a, b, c):
        raise ValueError("not a triangle")
    if a == b == c:
        return "Equilateral Triangle"
    if a == b or a == c or b == c:
        return "Isosceles Triangle"
    return "Scalene Triangle"


def grade(marks: int) -> str:
    """Return the letter grade for a mark."""
    for threshold, letter in ((90, "A"), (80, "B"), (70, "C"), (60, "D"), (50, "E")):
        if marks >= threshold:
            return letter
    return "F"


def is_multiple(a: int, b: int) -> bool:
    """True when either number is a multiple of the other.

    Raises ZeroDivisionError when either number is zero.
    """
    return a % b == 0 or b % a == 0


def greeting(hour: int) -> str:
    """Return the greeting for an hour of the day (0-23).

    Raises ValueError for hours outside that range.
    """
    if 5 <= hour < 12:
        return "Good Morning"
    if 12 <= hour < 18:
        return "Good Afternoon"
    if 18 <= hour < 21:
        return "Good Evening"
    if 21 <= hour <= 23 or 0 <= hour < 5:
        return "Good Night"
    raise ValueError("time is not valid")


def can_vote(age: int) -> bool:
    """True for ages of 18 and above."""
    return age >= 18


def parity_report(a: int, b: int) -> str:
    """Describe which of two numbers are even."""
    ra, rb = _trunc_mod(a, 2), _trunc_mod(b, 2)
    if ra == 0 and rb == 0:
        return "both num1 and num2 is even."
    if ra == 0 and rb == 1:
        return "only num1 is even."
    if ra == 1 and rb == 0:
        return "only num2 is even."
    return "both the number is odd"


def alphabet_half(ch: str) -> str:
    """Return "a-m" or "n-z" for a lower-case letter.

    Raises ValueError for anything else.
    """
    ch = _single_char(ch)
    if "a" <= ch <= "m":
        return "a-m"
    if "n" <= ch <= "z":
        return "n-z"
    raise ValueError("enter a valid alphabet")


def weekday_name(num: int) -> str:
    """Return the day name for 1-7, where 1 is Sunday."""
    if not 1 <= num <= 7:
        raise ValueError("enter a valid input")
    return _WEEKDAYS[num - 1]


def days_in_month(num: int) -> int:
    """Return the number of days in month 1-12, ignoring leap years."""
    if not 1 <= num <= 12:
        raise ValueError("not a valid input")
    return _DAYS_IN_MONTH[num - 1]


def month_name(num: int) -> str:
    """Return the English name of month 1-12."""
    if not 1 <= num <= 12:
        raise ValueError("not a valid input")
    return _MONTHS[num - 1]


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b