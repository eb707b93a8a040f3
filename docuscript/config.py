"""
docuscript configuration.

Values are read once from the environment at import time.  Functions that
depend on them accept an explicit override so callers (and tests) never have
to mutate the environment.
"""
import os

# Simulated latency of the "AI" calls, in seconds
AI_DELAY_SEC = float(os.getenv("DOCUSCRIPT_AI_DELAY_SEC", "1.0"))
CONVERSION_DELAY_SEC = float(os.getenv("DOCUSCRIPT_CONVERSION_DELAY_SEC", "2.0"))

# Logging
LOG_LEVEL = os.getenv("DOCUSCRIPT_LOG_LEVEL", "WARNING")

# Reading speed used for estimatedReadingTime
READING_WPM = int(os.getenv("DOCUSCRIPT_READING_WPM", "200"))

# Storyboard canvas
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 450
CANVAS_BACKGROUND = "#f0f0f0"

# Frames produced per text-to-storyboard run
MAX_GENERATED_FRAMES = 8
DEFAULT_FRAME_DURATION_SEC = 5.0

# Caller-supplied timestamps default to the epoch; the clock is never read
DEFAULT_CREATED_AT = "1970-01-01T00:00:00Z"
