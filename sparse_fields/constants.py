"""
Field Selection Constants

Reserved tokens and built-in defaults for the selection mini-language.
"""

# Leading character marking a token as a group reference ("@basic")
GROUP_PREFIX = "@"

DEFAULT_QUERY_PARAM = "fields"
DEFAULT_HEADER_NAME = "x-fields"
DEFAULT_SEPARATOR = ","
