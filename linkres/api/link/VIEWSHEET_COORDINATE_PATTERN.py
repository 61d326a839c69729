"""Legacy inline viewsheet coordinate: ``scope^id^owner^path``."""

import re

VIEWSHEET_COORDINATE_PATTERN = re.compile(r"^(\d)\^(\d{1,5})\^([^^]+)\^(.+)$", re.DOTALL)
