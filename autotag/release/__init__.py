"""Version-bump decision engine and release flow.

- semver: tag parsing and bumping
- commits: per-message classification
- bump: batch aggregation
- identity: repository resolution
- service: orchestration against a ReleaseBackend
"""

from __future__ import annotations
