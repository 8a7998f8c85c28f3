"""Global constants for the application."""

# Render settings
DEFAULT_WIDTH = 512  # Output frame width in pixels
DEFAULT_HEIGHT = 512  # Output frame height in pixels
DEFAULT_FPS = 0.0  # 0 keeps the animation's native frame rate
DEFAULT_THREADS = 0  # 0 uses every available CPU

# Animated output settings
DEFAULT_QUALITY = 90  # WebP quality (1-100)

# Raster layout
BYTES_PER_PIXEL = 4  # RGBA, one byte per channel
OUTPUT_BYTES_PER_PIXEL = 3  # RGB, alpha is dropped on encode

# Frame file naming
FRAME_NAME_MIN_DIGITS = 3  # 000.png ... 999.png, widened past 999
FRAME_FILE_EXTENSION = ".png"
