"""DefectDojo installer (bootstrap + source acquisition).

Core design goals:
- Distro command tables kept as data
- Hard/soft command severity
- Resumable release download
- Commit-over-branch source checkout
- Centralized logging
"""

__all__ = []
