# catr/core/constants.py
# Constants shared by the source reader, numberer & CLI

# * Source token meaning "read standard input"
STDIN_TOKEN = "-"

# * Minimum field width for line numbers (space-padded, never truncated)
NUMBER_WIDTH = 6

# * Separator between the line number & the line text
NUMBER_SEPARATOR = "\t"

# * Encoding used to decode input lines; undecodable lines are skipped
INPUT_ENCODING = "utf-8"

# * Consecutive mid-stream read failures tolerated before a stream is ended
MAX_CONSECUTIVE_READ_ERRORS = 8
