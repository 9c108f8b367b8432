# Copyright 2020-2024 dcmdump authors. See LICENSE file for details.
"""Version information for dcmdump."""
import re
from typing import cast, Match


__version__: str = '0.3.0'

result = cast(Match[str], re.match(r'(\d+\.\d+\.\d+).*', __version__))
__version_info__ = tuple(result.group(1).split('.'))
