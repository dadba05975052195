import os
from dotenv import load_dotenv
load_dotenv()

KEY_BITS = int(os.getenv("CRYPTR_KEY_BITS", "128"))
LOG_LEVEL = os.getenv("CRYPTR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("CRYPTR_LOG_FORMAT", "%(asctime)s - %(levelname)s - %(name)s - %(message)s")
