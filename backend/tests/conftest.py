"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real store
os.environ.setdefault("SUPABASE_URL", "http://store.test")
os.environ.setdefault("SUPABASE_ANON_KEY", "anon-test-key")
os.environ.setdefault("LOG_FORMAT", "text")
