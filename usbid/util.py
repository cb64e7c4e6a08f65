#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""Utility functions used by the library. Mostly for internal usage"""

import functools
import string

from .types import Callable, Iterator

int16 = functools.partial(int, base=16)


def hex_code(text: str, digits: int) -> int:
    """
    Translate an hexadecimal code of at most the given number of digits
    (optionally prefixed with 0x) into an int.

    Raises:
        ValueError: if the text is not a valid code
    """
    text = text.strip().lower().removeprefix("0x")
    if not text or len(text) > digits or not all(c in string.hexdigits for c in text):
        raise ValueError(f"invalid {digits} digit hexadecimal code: {text!r}")
    return int16(text)


def make_find(iter_devices: Callable[[], Iterator], needs_open=True) -> Callable:
    """
    Create a find function for the given callable. The callable should
    return an iterable where each element has the context manager capability
    (ie, it can be used in a with statement)
    """

    def find(find_all=False, custom_match=None, **kwargs):
        idevs = iter_devices()
        if kwargs or custom_match:

            def simple_accept(dev):
                result = all(getattr(dev, key) == value for key, value in kwargs.items())
                if result and custom_match:
                    return custom_match(dev)
                return result

            if needs_open:

                def accept(dev):
                    with dev:
                        return simple_accept(dev)
            else:
                accept = simple_accept

            idevs = filter(accept, idevs)
        return idevs if find_all else next(idevs, None)

    return find
