"""
Settings, read from the environment, a `.env` file or `settings.ini`.
"""
from pathlib import Path

from decouple import AutoConfig, Choices

BASE_DIR = Path(__file__).resolve().parent.parent
config = AutoConfig(search_path=BASE_DIR)

# ==========================================
# SUBMISSION
# ==========================================
# "defer": log validation failures and submit anyway (execution service decides)
# "strict": refuse to submit a job whose validation report fails
VALIDATION_POLICY = config(
    'OCO_VALIDATION_POLICY', default='defer', cast=Choices(['defer', 'strict'])
)

# "memory": in-process job queue; "noop": drop submitted jobs
JOB_SUBMITTER = config('OCO_JOB_SUBMITTER', default='memory', cast=Choices(['memory', 'noop']))

# Most recent jobs kept by the "memory" submitter; older ones are dropped
JOB_HISTORY = config('OCO_JOB_HISTORY', default=100, cast=int)

# Direction of a fresh draft
DEFAULT_DIRECTION = config('OCO_DEFAULT_DIRECTION', default='BUY', cast=Choices(['BUY', 'SELL']))

# ==========================================
# LOGGING
# ==========================================
LOG_LEVEL = config('OCO_LOG_LEVEL', default='INFO')
LOG_JSON = config('OCO_LOG_JSON', default=False, cast=bool)
