"""중앙화된 기본값 및 산출물 경로 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 기본 설정값과 artifacts 경로를 중앙에서 관리한다.
모든 하드코딩된 값은 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 🔤 토큰화 기본값
# ====================================================================

# 공백, 문장부호, 괄호, 탭
DEFAULT_SEPARATORS = " ,.?!-:;[]{}/'\"()<>@#$%^&*_\t"

# ====================================================================
# 🔠 폰트 크기 범위
# ====================================================================

FONT_MIN = 11
FONT_MAX = 48

# ====================================================================
# ☁️ 태그 클라우드 기본값
# ====================================================================

DEFAULT_NUM_WORDS = 100
DEFAULT_TOP_K = 20
DEFAULT_ENCODING = "utf-8"

REMOTE_STYLESHEET_URL = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css"
)
LOCAL_STYLESHEET = "tagcloud.css"

# ====================================================================
# 📁 산출물 경로
# ====================================================================

ARTIFACTS_ROOT = Path("artifacts")

LOGS_DIR = ARTIFACTS_ROOT / "logs"
