"""
This module contains variables that can be tweaked through the system environment. Constants do
NOT belong in this module. Constants are values that should not be altered without making a code
change (e.g., the `font-weight` above which text renders bold). Constants go into `./constants.py`
"""

import os
from dataclasses import dataclass

from styleruns.constants import DEFAULT_CONTAINER_TAG


@dataclass
class ENVConfig:
    """class for configuring environment parameters"""

    def _get_string(self, var: str, default_value: str = "") -> str:
        """attempt to get the value of var from the os environment; if not present return the
        default_value"""
        return os.environ.get(var, default_value)

    @property
    def CONTAINER_TAG(self) -> str:
        """tag name of the top-level elements that each give rise to a document

        Only top-level elements (those without a parent in the fragment) are considered. A blank
        value falls back to the default.
        """
        return (
            self._get_string("STYLERUNS_CONTAINER_TAG").strip().lower() or DEFAULT_CONTAINER_TAG
        )


env_config = ENVConfig()
