"""
ivsedit.unicode - unicode utilities

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


###################################################################################################
# variation selectors

# Variation Selectors, VS1..VS16
VS_RANGE = range(0xFE00, 0xFE10)
# Variation Selectors Supplement, VS17..VS256
VSS_RANGE = range(0xE0100, 0xE01F0)

# regex character class matching any variation selector
SELECTOR_CLASS = r'[\uFE00-\uFE0F\U000E0100-\U000E01EF]'


def is_selector(codepoint):
    """Check if a code point or character is a variation selector."""
    if isinstance(codepoint, str):
        if len(codepoint) != 1:
            return False
        codepoint = ord(codepoint)
    return codepoint in VS_RANGE or codepoint in VSS_RANGE


def selector_number(selector):
    """Convert variation selector code point to its selector number; 0 if not a selector."""
    if selector in VS_RANGE:
        return selector - VS_RANGE.start + 1
    elif selector in VSS_RANGE:
        return selector - VSS_RANGE.start + 17
    return 0


def selector_string(selector):
    """Convert variation selector code point to a string like VS17."""
    num = selector_number(selector)
    if num:
        return f'VS{num}'
    return '?'


###################################################################################################
# ideographs

# blocks with CJK ideographic characters, including radicals and ideographic marks
_IDEOGRAPHIC_RANGES = (
    # CJK Radicals Supplement, Kangxi Radicals
    (0x2E80, 0x2FDF),
    # ideographic iteration mark, closing mark, number zero
    (0x3005, 0x3007),
    # hangzhou numerals
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    # CJK Unified Ideographs Extension A
    (0x3400, 0x4DBF),
    # CJK Unified Ideographs
    (0x4E00, 0x9FFF),
    # CJK Compatibility Ideographs
    (0xF900, 0xFAFF),
    # Extensions B to F, Compatibility Ideographs Supplement
    (0x20000, 0x2FA1F),
    # Extensions G and H
    (0x30000, 0x323AF),
)


def is_ideograph(char):
    """Check if a character is in an ideographic block."""
    if not char:
        return False
    codepoint = ord(char[0])
    # most characters are below the first block
    if codepoint < 0x2E80:
        return False
    return any(
        _start <= codepoint <= _end
        for _start, _end in _IDEOGRAPHIC_RANGES
    )


def format_codepoint(codepoint):
    """Represent a code point as U+XXXX."""
    if isinstance(codepoint, str):
        codepoint = ord(codepoint)
    return f'U+{codepoint:04X}'
