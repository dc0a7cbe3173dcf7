from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv(ROOT / ".env")

from semantic_splitter.app import create_app
from semantic_splitter.config import SplitterServiceConfig
from semantic_splitter.logging_config import setup_logging
from semantic_splitter.service import SplittingService
import uvicorn


config = SplitterServiceConfig.from_env()
setup_logging(config.log_level)
app = create_app(SplittingService(config))

uvicorn.run(app, host="0.0.0.0", port=8002)
