# Settings key holding the program name when loading the process arguments
PROGNAME_KEY = "knob.progname"

# Stored value for a switch that was given on the command line
SWITCH_VALUE = "true"

# Usage layout: row indentation and the column where descriptions start
USAGE_INDENT = "    "
USAGE_DESC_COLUMN = 24
