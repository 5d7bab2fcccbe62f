"""日志配置：控制台文本格式或 JSON 结构化格式"""
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from config.settings import LOG_LEVEL, LOG_SERVICE_NAME

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LoanJsonFormatter(JsonFormatter):
    """JSON 日志，附带时间戳、级别和服务名"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = LOG_SERVICE_NAME


def setup_logging(level: str = LOG_LEVEL, json_format: bool = False) -> None:
    """配置根 logger，输出到 stderr"""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # 移除已有 handler，避免重复输出
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(LoanJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)
