"""
ivsedit.constants - package constants

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.3.0'

# collection eligible for conversion to and from \CID{} escapes
INTERCHANGE_COLLECTION = 'Adobe-Japan1'

# display order of collections when offering variations for a bare character
DEFAULT_PREFERENCE = ('Adobe-Japan1', 'Hanyo-Denshi', 'Moji_Joho')

# names in the interchange collection look like CID+12345
CID_PREFIX_LENGTH = len('CID+')

# lowest code point flagged by the non-member scan
MIN_IDEOGRAPH = 0x3400
