from pathlib import Path

import pytest
from loguru import logger
from PIL import Image

import gameboy_image_scaler.log_setup as _log_setup


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()


@pytest.fixture
def caplog(caplog: pytest.LogCaptureFixture):
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


@pytest.fixture
def log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    logs = tmp_path / "logs"
    monkeypatch.setattr(_log_setup, "LOG_DIR", logs)
    return logs


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "workspace"
    ws.mkdir()
    return ws


def make_dotted_bmp(path: Path, size: tuple[int, int] = (128, 112)) -> Path:
    image = Image.new("RGB", size, (255, 255, 255))
    for y in range(0, size[1], 2):
        for x in range(0, size[0], 2):
            image.putpixel((x, y), (0, 0, 0))
    image.save(path, "BMP")
    return path
