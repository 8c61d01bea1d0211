"""NMEA protocol and Aaronia log constants."""

# Aaronia receivers interleave proprietary status lines with the NMEA stream
VENDOR_COMMENT_PREFIX = "$PAAG"

# Sentence types (last three characters of the address field)
PRIMARY_SENTENCE_TYPE = "RMC"
SECONDARY_SENTENCE_TYPE = "GGA"

# Minimum data fields after the address field
RMC_MIN_FIELDS = 9
GGA_MIN_FIELDS = 9

# NMEA dates carry a two-digit year
NMEA_CENTURY = 2000

# Default look-back for the resynchronizing pairer (previous + last)
DEFAULT_RESYNC_WINDOW = 2

# Output document
DEFAULT_OUTPUT_EXTENSION = "json"
DEFAULT_SYSTEM_NAME = "Unknown"
DEFAULT_VENDOR_NAME = "Unknown"
TRACK_NAME_TEMPLATE = "Aaronia GPS track '{}'"
TRACK_NAME_FALLBACK = "no filename"
DEFAULT_UAS_ID = 1
