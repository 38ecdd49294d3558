"""Shared pytest configuration: Hypothesis profiles.

Select a profile with HYPOTHESIS_PROFILE=ci|dev; the default is "dev".
"""

import os

from hypothesis import settings

settings.register_profile("dev", max_examples=200, deadline=None)
settings.register_profile("ci", max_examples=50, deadline=None, derandomize=True)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))
