# 執行環境設定：從 .env 與環境變數讀取

import os

from dotenv import load_dotenv

load_dotenv()

# 日誌
LOG_DIR = os.getenv("DOCREF_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("DOCREF_LOG_LEVEL", "DEBUG")

# BeautifulSoup 解析器 (lxml / html.parser / html5lib)
HTML_PARSER = os.getenv("DOCREF_HTML_PARSER", "lxml")

# python -m src.docref 的預設路徑
INPUT_DIR = os.getenv("DOCREF_INPUT_DIR", "artifacts/site")
REPORT_PATH = os.getenv("DOCREF_REPORT_PATH", "artifacts/docref/reference_report.json")
OUTPUT_DIR = os.getenv("DOCREF_OUTPUT_DIR", "artifacts/docref/rewritten")
REBASE_URL = os.getenv("DOCREF_REBASE_URL", "")
