import os

SUCCESS_EXITCODE = 0
ERROR_EXITCODE = 1

STDERROR_LOG_LEVEL = os.environ.get('MD5_LOG_LEVEL', 'ERROR')
LOG_FORMAT = "%(asctime)s %(levelname)8s %(message)s"

HASH_OUTPUT_PREFIX = 'hash: '
