from loguru import logger
from pathlib import Path

from src.config.settings import LOG_DIR, LOG_LEVEL

log_dir = Path(LOG_DIR)
log_file = log_dir / "docref_{time}.log"

logger.remove()
logger.add(
    log_file,
    rotation="256 MB",  # 每個檔案滿 256MB 就切分
    retention="10 days",  # 只保留最近 10 天的日誌
    compression="zip",  # 切分後的舊檔案自動壓縮成 zip
    encoding="utf-8",
    level=LOG_LEVEL,
)
