"""
Configuration constants to replace magic strings throughout jslink
"""

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# Directive constants
DIRECTIVE_MARKER = "#"
IMPORT_COMMAND = "import"

# Module resolution constants
MODULE_SEPARATOR = "."
MODULE_FILE_EXTENSION = ".js"
EXPORT_MODULE_EXTENSION = ".export.js"
PACKAGE_INDEX_FILENAME = "^.js"
OVERLAY_FILENAME_TEMPLATE = "<overlay:{name}>"

# Code generation constants
SLOT_VARIABLE_PREFIX = "__module_"

# Generator module constants
EXPORT_DUMP_FUNCTION = "dump"

# Logging constants
LOG_LEVEL_ENV_VAR = "JSLINK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Error reporting constants
COLOR_ENV_VAR = "JSLINK_COLOR"
ERROR_POINTER_CHAR = "^"
