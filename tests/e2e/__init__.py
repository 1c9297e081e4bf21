import os

import pytest

LIVE = os.getenv("QAPROBE_E2E", "false").lower() in ["true", "1", "yes"]

live = pytest.mark.skipif(not LIVE, reason="live services disabled (set QAPROBE_E2E=true)")
