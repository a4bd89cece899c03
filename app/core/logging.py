# app/core/logging.py
# -----------------------------------------------------------------------------
# Loguru 기반 로깅 설정
# - 파일 회전/백트레이스/레벨 지정
# - 콘솔(stderr) 출력도 같은 레벨로 추가
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from app.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(exist_ok=True, parents=True)

logger.remove()  # 기본 핸들러 제거
logger.add(
    LOG_DIR / "app.log",
    rotation="10 MB",
    retention=10,  # 최근 10개 파일 보관
    enqueue=True,  # 멀티프로세스 안전
    backtrace=True,
    diagnose=False,  # 트레이스에 변수값(이메일 등) 미출력
    level=settings.LOG_LEVEL,
)
logger.add(sys.stderr, level=settings.LOG_LEVEL)
