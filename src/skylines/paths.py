
# Application identifiers
APP_ID = "skylines"
APP_AUTHOR = "skylines"


# Source / output file names
HYGDATA_FILE_NAME = "hygdata_v3.csv"
CLINES_FILE_NAME = "clines.dat"
OUTPUT_FILE = "constellations.js"


# Source locations
CLINES_URL = "https://cdn.jsdelivr.net/gh/KDE/kstars/kstars/data/clines.dat"
HYGDATA_URL = "https://raw.githubusercontent.com/astronexus/HYG-Database/master/hygdata_v3.csv"


# Catalog columns (zero-based, split on commas)
ID_COLUMN = 2  # HD number
RA_COLUMN = 7  # hours
DEC_COLUMN = 8  # degrees
MIN_COLUMNS = max(ID_COLUMN, RA_COLUMN, DEC_COLUMN) + 1


# clines.dat line markers
SECTION_MARKER = "C"
SEPARATOR = "#"
MOVE = "M"
DRAW = "D"


# Output
OUTPUT_PRECISION = 6
MODULE_PREFIX = "module.exports="
