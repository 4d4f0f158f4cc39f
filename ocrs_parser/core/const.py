# =============================================================================
# Record Format
# =============================================================================

SCHEMA_NAME = "ocrs_recipe"  # json_schema.name sent with structured-output requests
SCHEMA_FILE = "ocrs-1.0.schema.json"
PROMPT_FILE = "{version}.prompt.txt"
DEFAULT_PROMPT_VERSION = "v1"


# =============================================================================
# Preprocessing Limits
# =============================================================================

MAX_INPUT_LENGTH = 50_000  # characters, roughly 12K tokens
TITLE_MAX_LENGTH = 80  # first paragraph shorter than this may be a title
MIN_TITLED_PARAGRAPHS = 3


# =============================================================================
# Semantic Rule Thresholds
# =============================================================================

# Cheesemaking rarely exceeds ~80°C (stretching mozzarella); pasteurization is 63°C.
# Anything hotter is almost always an unconverted Fahrenheit value.
MAX_PLAUSIBLE_TEMP_C = 85

# Fresh milk sits at 6.5-6.7 and finished cheese at 4.9-5.3, with a buffer.
PH_MIN = 4.0
PH_MAX = 7.0

REQUIRED_ALLERGENS = ("MILK", "LACTOSE")


# =============================================================================
# Pipeline
# =============================================================================

DEFAULT_MAX_RETRIES = 2  # 3 provider calls in total


# =============================================================================
# Error Handling
# =============================================================================

ERROR_BODY_MAX_CHARS = 200  # Maximum chars from error response bodies
