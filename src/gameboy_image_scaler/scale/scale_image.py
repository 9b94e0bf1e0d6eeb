import gc
from enum import Enum, auto
from pathlib import Path

from loguru import logger
from PIL import Image

from gameboy_image_scaler.consts import (
    GAME_BOY_IMAGE_FORMAT_OUTPUT,
    GAME_BOY_IMAGE_HEIGHT,
    GAME_BOY_IMAGE_SIZE,
    GAME_BOY_IMAGE_WIDTH,
    PROCESSED_IMAGE_SUFFIX,
    SCALED_CANVAS_MODE,
)


class ScaleResult(Enum):
    SAVED = auto()
    SKIPPED = auto()
    ERROR = auto()


def get_scaled_size(scale_factor: float) -> tuple[int, int]:
    return round(GAME_BOY_IMAGE_WIDTH * scale_factor), round(GAME_BOY_IMAGE_HEIGHT * scale_factor)


def is_usable_scaled_size(size: tuple[int, int]) -> bool:
    width, height = size
    if width < 1 or height < 1:
        return False
    # Pillow's decompression bomb limit.
    return Image.MAX_IMAGE_PIXELS is None or width * height <= Image.MAX_IMAGE_PIXELS


def new_scaled_canvas(scale_factor: float) -> Image.Image:
    return Image.new(SCALED_CANVAS_MODE, get_scaled_size(scale_factor))


def get_processed_path(image_file: Path) -> Path:
    # A file named just ".bmp" has an empty stem.
    stem = image_file.name.rpartition(".")[0] if "." in image_file.name else image_file.name
    extension = GAME_BOY_IMAGE_FORMAT_OUTPUT.lower()
    return image_file.parent / f"{stem}{PROCESSED_IMAGE_SUFFIX}.{extension}"


def draw_nearest_neighbor(original: Image.Image, canvas: Image.Image) -> None:
    """Stretch 'original' over the whole of 'canvas' without any smoothing.

    The canvas has the same aspect ratio as a Game Boy image, so there is no
    letterboxing. Every canvas pixel is overwritten.
    """
    scaled = original.convert(canvas.mode).resize(canvas.size, Image.Resampling.NEAREST)
    canvas.paste(scaled, (0, 0))


def remove_existing_file(file: Path) -> None:
    try:
        file.unlink()
    except PermissionError:
        # A lingering image handle may still hold the file open. Reclaim and retry once.
        logger.warning(f'Could not delete "{file}" - releasing image handles and retrying.')
        gc.collect()
        file.unlink()


def scale_and_save_image_file(canvas: Image.Image, image_file: Path) -> ScaleResult:
    name = image_file.name

    # noinspection PyBroadException
    try:
        with Image.open(image_file) as original:
            if original.size != GAME_BOY_IMAGE_SIZE:
                logger.info(
                    f'Skipping "{name}" because size is not the expected'
                    f" {GAME_BOY_IMAGE_WIDTH}x{GAME_BOY_IMAGE_HEIGHT}"
                    f" (got {original.width}x{original.height}).",
                )
                return ScaleResult.SKIPPED

            logger.info(f'Processing "{name}".')
            draw_nearest_neighbor(original, canvas)

        processed_path = get_processed_path(image_file)
        if processed_path.exists():
            remove_existing_file(processed_path)

        logger.info(f'Saving "{processed_path}".')
        canvas.save(processed_path, GAME_BOY_IMAGE_FORMAT_OUTPUT)

    except Exception:  # noqa: BLE001
        logger.exception(f'Error processing "{name}": ')
        return ScaleResult.ERROR

    return ScaleResult.SAVED
