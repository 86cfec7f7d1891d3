"""Constants shared by the parser and the statement formatter."""

# Argument syntax
ENTITY_SEPARATOR = "/"
PLAIN_SEPARATOR = ":"
SMART_SEPARATOR = "@"
NAME_SEGMENT_SEPARATOR = "_"

DEFAULT_ID_COLUMN = "id"

# SQL keywords used when expanding smart columns
INTEGER_TYPE = "INTEGER"
NOT_NULL = "NOT NULL"
UNIQUE = "UNIQUE"
PRIMARY_KEY = "PRIMARY KEY"

# Output banners
SCHEMA_BANNER = (
    "#############################################\n"
    "# Add the following to your SQL schema file #\n"
    "#############################################"
)
QUERIES_BANNER = (
    "##############################################\n"
    "# Add the following to your SQL queries file #\n"
    "##############################################"
)

# Column indentation inside generated statements
INDENT = "  "
