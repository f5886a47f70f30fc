# Format used when an instance is configured without one.
DIGIT_FORMAT = "(,ddd)"
# Fallback repeating pattern for an explicitly empty grouping group.
FALLBACK_PATTERN = "d"

# Animation timing (milliseconds / frames per second).
DURATION = 2000
FRAMERATE = 30
COUNT_FRAMERATE = 20
# Frames each intermediate value stays visible in a slide column.
FRAMES_PER_VALUE = 2
# Extra speed given to every subsampled column after the first one.
DIGIT_SPEEDBOOST = 0.5

# Grace period added to the duration before animate_once_and_disconnect gives up waiting.
DESTROY_GRACE_MS = 100
# Cadence of the timer used when no display refresh tick is available (~60fps).
FALLBACK_FRAME_MS = 1000 / 60

# Discovery
DEFAULT_SELECTOR = ".odometer"

# Presentation tags applied to surfaces.
TAG_BASE = "odometer"
TAG_THEME = "odometer-auto-theme"
TAG_ANIMATING = "odometer-animating"
TAG_ANIMATING_UP = "odometer-animating-up"
TAG_ANIMATING_DOWN = "odometer-animating-down"

# Token classes
CLASS_FIRST_VALUE = "odometer-first-value"
CLASS_LAST_VALUE = "odometer-last-value"
CLASS_NEGATION_MARK = "odometer-negation-mark"
CLASS_RADIX_MARK = "odometer-radix-mark"

# Surface properties shared with the renderer.
PROPERTY_DURATION = "--odometer-duration"
PROPERTY_PROGRESS = "--odometer-progress"
