"""Soundex variant tuned for transliterated Slavic player names.

Derived from Knuth's soundex, made tolerant enough that Nimzovich matches
Nimzowitsch and Tal matches Talj. The price is the occasional wildly false
match, which is preferred over missing games.
"""

import string

MAX_SOUNDEX = 50

#                ABCDEFGHIJKLMNOPQRSTUVWXYZ
_MAPPING = dict(zip(string.ascii_uppercase, '01230120002455012622011202'))


def soundex(name: str) -> str:
    """Calculate the phonetic code for a name.

    A leading J or Y becomes '7' so that Yusupov matches Jusupov and
    Janosevic does not collapse onto Nimzovich.

    Args:
        name: Raw name, any case.

    Returns:
        Code of at most MAX_SOUNDEX digits.
    """
    code: list[str] = []
    rest = name
    if name[:1].upper() in ('J', 'Y'):
        code.append('7')
        rest = name[1:]

    last_letter = ''
    last_digit = ''
    for ch in rest:
        if len(code) >= MAX_SOUNDEX:
            break
        if ch not in string.ascii_letters:
            continue
        letter = ch.upper()
        if letter == last_letter:
            continue
        last_letter = letter
        digit = _MAPPING[letter]
        if digit != '0' and digit != last_digit:
            code.append(digit)
            last_digit = digit
    return ''.join(code)
