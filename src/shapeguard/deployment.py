# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import logging
import os
from typing import Any

LOG_FAILURES: bool = os.getenv("SHAPEGUARD_LOG_FAILURES", "0") == "1"
LOGGER: Any = logging.getLogger("shapeguard")
VARIABLE_NAME: str = os.getenv("SHAPEGUARD_VARIABLE_NAME", "variable")
