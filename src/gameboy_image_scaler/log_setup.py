from pathlib import Path

# Globals accessed by loguru-config through "ext://" references in log-config.yaml.
# Set these before calling 'LoguruConfig.load'.

APP_LOGGING_NAME = "gbsc"

LOG_DIR = Path.home() / ".local/share/gameboy-image-scaler/logs"

log_level = "INFO"
log_filename = "gameboy-image-scaler.log"
log_path = LOG_DIR / log_filename
