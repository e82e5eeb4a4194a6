"""Chat colour code translation for configured messages.

Messages in the settings document use an alternate colour character
(``&`` by default) so they can be typed on a normal keyboard. The host chat
expects the section sign instead. Translation is idempotent: once ``&a``
became ``§a`` there is no ``&`` code left to translate.

Example:
    >>> translate_alternate_color_codes("&aEnabled")
    '§aEnabled'
"""

from __future__ import annotations

COLOR_CHAR = "§"
"""Section sign used by the host chat to introduce a format code."""

DEFAULT_ALT_COLOR_CHAR = "&"

_FORMAT_CODES = frozenset("0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx")


def translate_alternate_color_codes(text: str, alt_char: str = DEFAULT_ALT_COLOR_CHAR) -> str:
    """Replace ``alt_char`` + format code pairs with the section sign form.

    Only an ``alt_char`` directly followed by a valid format code is
    replaced; the code character is lower-cased. Anything else is kept as is.

    Args:
        text: Message text as stored in the settings document.
        alt_char: Single character used in place of the section sign.

    Returns:
        The translated message.
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and chars[i + 1] in _FORMAT_CODES:
            chars[i] = COLOR_CHAR
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)
