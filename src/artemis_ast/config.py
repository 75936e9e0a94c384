import os
from dotenv import load_dotenv

# Load .env (if present) so defaults can be set per game directory
load_dotenv()

# Text encoding of .ast files (a leading BOM is always tolerated on read)
ENCODING = os.getenv("ARTEMIS_AST_ENCODING", "utf-8")

LOG_LEVEL = os.getenv("ARTEMIS_AST_LOG_LEVEL", "WARNING").upper()

# Suffix of the strings file written next to each .ast by extract-dir
EXTRACT_SUFFIX = os.getenv("ARTEMIS_AST_EXTRACT_SUFFIX", ".yaml")
# Suffix of the translated strings file merge-dir looks for
MERGE_SUFFIX = os.getenv("ARTEMIS_AST_MERGE_SUFFIX", ".cn")
