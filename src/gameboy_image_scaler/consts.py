GAME_BOY_IMAGE_WIDTH = 128
GAME_BOY_IMAGE_HEIGHT = 112
GAME_BOY_IMAGE_SIZE = (GAME_BOY_IMAGE_WIDTH, GAME_BOY_IMAGE_HEIGHT)

DEFAULT_SCALE_FACTOR = 10.0

# Pillow format names. The file extension is the lowercase format name.
GAME_BOY_IMAGE_FORMAT_INPUT = "BMP"
GAME_BOY_IMAGE_FORMAT_OUTPUT = "PNG"

PROCESSED_IMAGE_SUFFIX = "-scaled"

SCALED_CANVAS_MODE = "RGBA"
