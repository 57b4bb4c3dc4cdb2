"""
Text normalization applied before tokenization.

Older Esperanto texts (and anyone typing without an Esperanto keyboard) use
the X-system: cx, gx, hx, jx, sx, ux stand for ĉ, ĝ, ĥ, ĵ, ŝ, ŭ.
"""

import re

X_SYSTEM_REPLACEMENTS = {
    'Cx': 'Ĉ', 'cx': 'ĉ', 'CX': 'Ĉ', 'cX': 'ĉ',
    'Gx': 'Ĝ', 'gx': 'ĝ', 'GX': 'Ĝ', 'gX': 'ĝ',
    'Hx': 'Ĥ', 'hx': 'ĥ', 'HX': 'Ĥ', 'hX': 'ĥ',
    'Jx': 'Ĵ', 'jx': 'ĵ', 'JX': 'Ĵ', 'jX': 'ĵ',
    'Sx': 'Ŝ', 'sx': 'ŝ', 'SX': 'Ŝ', 'sX': 'ŝ',
    'Ux': 'Ŭ', 'ux': 'ŭ', 'UX': 'Ŭ', 'uX': 'ŭ',
}

_X_SYSTEM = re.compile('|'.join(X_SYSTEM_REPLACEMENTS))

DASHES = ('—', '–', '―')

QUOTE_REPLACEMENTS = {
    '“': '"',  # left double quote
    '”': '"',  # right double quote
    '‘': "'",  # left single quote
    '’': "'",  # right single quote
    '„': '"',  # low double quote
    '«': '"',  # guillemets
    '»': '"',
}


def convert_x_system(text: str) -> str:
    """Convert X-system digraphs to Esperanto letters: "cxu" -> "ĉu"."""
    return _X_SYSTEM.sub(lambda m: X_SYSTEM_REPLACEMENTS[m.group(0)], text)


def normalize_text(text: str) -> str:
    """
    Normalize text before analysis.

    - Converts the X-system to Unicode letters
    - Turns dashes into spaces so they separate words
    - Replaces typographic quotes with straight ones
    - Collapses whitespace
    """
    text = convert_x_system(text)

    for dash in DASHES:
        text = text.replace(dash, ' ')

    for old, new in QUOTE_REPLACEMENTS.items():
        text = text.replace(old, new)

    return ' '.join(text.split())
