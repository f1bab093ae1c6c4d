# Copyright (C) 2023 simple_std contributors
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Small helpers for beginner exercises: console input and random numbers.

Example, a guessing game:

    from simple_std import prompt, random_int_range

    number = random_int_range(0, 100)
    while True:
        guess = int(prompt("Guess: "))
        if guess < number:
            print("Too Small")
        elif guess > number:
            print("Too Big")
        else:
            print("You win!")
            break
"""

from simple_std.console import InputUnavailable, prompt, read_line
from simple_std.common.rand import InvalidRange, random_float, random_int_range

__all__ = [
    "InputUnavailable",
    "InvalidRange",
    "prompt",
    "random_float",
    "random_int_range",
    "read_line",
]
