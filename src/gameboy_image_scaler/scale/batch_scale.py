import math
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import typer
from loguru import logger
from loguru_config import LoguruConfig

import gameboy_image_scaler.log_setup as _log_setup
from gameboy_image_scaler.common_typer_options import LogLevelArg, WorkspaceAndScaleArgs
from gameboy_image_scaler.consts import DEFAULT_SCALE_FACTOR, GAME_BOY_IMAGE_FORMAT_INPUT
from gameboy_image_scaler.scale.scale_image import (
    ScaleResult,
    get_scaled_size,
    is_usable_scaled_size,
    new_scaled_canvas,
    scale_and_save_image_file,
)

APP_LOGGING_NAME = "bscl"

_RESOURCES = Path(__file__).parent.parent / "resources"

EXIT_INVALID_ARGUMENT = 2
EXIT_WORKSPACE_UNAVAILABLE = 3


class InvalidArgumentError(ValueError):
    pass


class WorkspaceUnavailableError(OSError):
    pass


@dataclass
class BatchSummary:
    num_saved: int = 0
    num_skipped: int = 0
    num_errors: int = 0

    def add(self, result: ScaleResult) -> None:
        if result == ScaleResult.SAVED:
            self.num_saved += 1
        elif result == ScaleResult.SKIPPED:
            self.num_skipped += 1
        else:
            self.num_errors += 1

    def get_num_files(self) -> int:
        return self.num_saved + self.num_skipped + self.num_errors


def get_program_dir() -> Path:
    return Path(sys.argv[0]).resolve().parent


def read_args(args: list[str], default_workspace: Path) -> tuple[Path, float]:
    if len(args) == 0:
        logger.info("No arguments, selecting defaults.")
        return default_workspace, DEFAULT_SCALE_FACTOR

    if len(args) == 2:  # noqa: PLR2004
        logger.info("Selecting workspace from arguments.")
        workspace = Path(args[0])
        try:
            scale_factor = float(args[1])
        except ValueError:
            scale_factor = math.nan
        if not math.isfinite(scale_factor) or scale_factor <= 0.0:
            msg = f'Invalid argument "{args[1]}".'
            raise InvalidArgumentError(msg)
        width, height = get_scaled_size(scale_factor)
        if not is_usable_scaled_size((width, height)):
            msg = f'Invalid argument "{args[1]}": scaled size {width}x{height} is unusable.'
            raise InvalidArgumentError(msg)
        return workspace, scale_factor

    msg = "Invalid argument count provided."
    raise InvalidArgumentError(msg)


def get_image_format_file_list(workspace: Path, image_format: str) -> list[Path]:
    extension = image_format.lower()

    try:
        return [
            f
            for f in workspace.iterdir()
            if f.name.lower().endswith(f".{extension}") and f.is_file()
        ]
    except OSError as e:
        msg = f'Could not list workspace "{workspace}": {e}'
        raise WorkspaceUnavailableError(msg) from e


def scale_images(workspace: Path, scale_factor: float) -> BatchSummary:
    start = time.time()

    summary = BatchSummary()

    image_files = get_image_format_file_list(workspace, GAME_BOY_IMAGE_FORMAT_INPUT)
    if not image_files:
        logger.info(f'No {GAME_BOY_IMAGE_FORMAT_INPUT} files found in workspace "{workspace}".')
        return summary

    width, height = get_scaled_size(scale_factor)
    logger.info(
        f"Scaling {len(image_files)} {GAME_BOY_IMAGE_FORMAT_INPUT} files"
        f" by {scale_factor} to {width}x{height}...",
    )

    with new_scaled_canvas(scale_factor) as canvas:
        for image_file in image_files:
            summary.add(scale_and_save_image_file(canvas, image_file))

    logger.info(
        f"Saved {summary.num_saved}, skipped {summary.num_skipped},"
        f" errors {summary.num_errors}.",
    )
    logger.info(
        f"Time taken to scale all {summary.get_num_files()} files: {int(time.time() - start)}s.",
    )

    return summary


app = typer.Typer()


@app.command(help="Nearest-neighbor upscale all 128x112 Game Boy bmp files in a workspace")
def main(
    args: WorkspaceAndScaleArgs = None,
    log_level_str: LogLevelArg = "INFO",
) -> None:
    _log_setup.log_level = log_level_str
    _log_setup.log_filename = "batch-scale.log"
    _log_setup.log_path = _log_setup.LOG_DIR / _log_setup.log_filename
    _log_setup.APP_LOGGING_NAME = APP_LOGGING_NAME
    LoguruConfig.load(_RESOURCES / "log-config.yaml")

    logger.info("Reading arguments.")
    try:
        workspace, scale_factor = read_args(args or [], get_program_dir())
    except InvalidArgumentError as e:
        logger.error(str(e))
        sys.exit(EXIT_INVALID_ARGUMENT)

    try:
        scale_images(workspace, scale_factor)
    except WorkspaceUnavailableError as e:
        logger.error(str(e))
        sys.exit(EXIT_WORKSPACE_UNAVAILABLE)


if __name__ == "__main__":
    app()
