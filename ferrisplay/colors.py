"""ANSI escape sequences for terminal colours and text formatting."""

COLOR_FG_BLACK = "\x1b[30m"
COLOR_FG_RED = "\x1b[31m"
COLOR_FG_GREEN = "\x1b[32m"
COLOR_FG_YELLOW = "\x1b[33m"
COLOR_FG_BLUE = "\x1b[34m"
COLOR_FG_MAGENTA = "\x1b[35m"
COLOR_FG_CYAN = "\x1b[36m"
COLOR_FG_GRAY_BRIGHT = "\x1b[37m"
COLOR_FG_GRAY = "\x1b[90m"
COLOR_FG_RED_BRIGHT = "\x1b[91m"
COLOR_FG_GREEN_BRIGHT = "\x1b[92m"
COLOR_FG_YELLOW_BRIGHT = "\x1b[93m"
COLOR_FG_BLUE_BRIGHT = "\x1b[94m"
COLOR_FG_MAGENTA_BRIGHT = "\x1b[95m"
COLOR_FG_CYAN_BRIGHT = "\x1b[96m"
COLOR_FG_WHITE = "\x1b[97m"

COLOR_BG_BLACK = "\x1b[40m"
COLOR_BG_RED = "\x1b[41m"
COLOR_BG_GREEN = "\x1b[42m"
COLOR_BG_YELLOW = "\x1b[43m"
COLOR_BG_BLUE = "\x1b[44m"
COLOR_BG_MAGENTA = "\x1b[45m"
COLOR_BG_CYAN = "\x1b[46m"
COLOR_BG_GRAY_BRIGHT = "\x1b[47m"
COLOR_BG_GRAY = "\x1b[100m"
COLOR_BG_RED_BRIGHT = "\x1b[101m"
COLOR_BG_GREEN_BRIGHT = "\x1b[102m"
COLOR_BG_YELLOW_BRIGHT = "\x1b[103m"
COLOR_BG_BLUE_BRIGHT = "\x1b[104m"
COLOR_BG_MAGENTA_BRIGHT = "\x1b[105m"
COLOR_BG_CYAN_BRIGHT = "\x1b[106m"
COLOR_BG_WHITE = "\x1b[107m"

FORMAT_RESET = "\x1b[0m"
FORMAT_BOLD = "\x1b[1m"
FORMAT_DIM = "\x1b[2m"
FORMAT_ITALIC = "\x1b[3m"
FORMAT_UNDERLINE = "\x1b[4m"
FORMAT_BLINK_SLOW = "\x1b[5m"
FORMAT_BLINK_FAST = "\x1b[6m"
FORMAT_INVERT = "\x1b[7m"