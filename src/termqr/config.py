"""Default configuration values."""

DEFAULT_SIZE = 25  # modules when auto-detection is unavailable
SIZE_SCALE = (25, 29, 33, 37, 41, 45, 49, 53, 57, 61)  # user scale 1-10
AUTO_SIZE_MIN = 10  # exclusive bounds for a detected terminal size
AUTO_SIZE_MAX = 50
DEFAULT_BORDER = 2  # quiet-zone modules in terminal mode
DEFAULT_RASTER_BORDER = 4  # quiet-zone modules when raster border is on
DEFAULT_PIXELS_PER_MODULE = 8
DEFAULT_ERROR_LEVEL = "m"
DEFAULT_COLOR_FG = 0  # black
DEFAULT_COLOR_BG = 255  # white
FULL_BLOCK = "██"
EMPTY_BLOCK = "  "
READ_BUF = 1024 * 4
