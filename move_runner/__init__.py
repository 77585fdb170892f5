from __future__ import annotations

from .constants import BASE_DIR, DEFAULT_ENV_FILE, LOG_FILE, NETWORK_TO_NODE_API, PACKAGE_DIR
from .env_utils import MissingEnvironmentError, UnknownNetworkError
from .compiler import compile_package
from .publisher import publish_package
