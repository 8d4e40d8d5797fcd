UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SPECIAL = "!@#$%^&*()-_=+,.?/:;{}[]`~"
ALL_CHARS = UPPERCASE + LOWERCASE + DIGITS + SPECIAL

DEFAULT_MIN_LENGTH = 6
DEFAULT_MAX_LENGTH = 16

# error codes
NEGATIVE_LENGTH = "lengths must not be negative"
MIN_EXCEEDS_MAX = "minimum exceeds maximum"
MALFORMED_POLICY = "malformed policy"
