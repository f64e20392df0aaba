import os

os.environ.setdefault("PAYTRACK_DATABASE_URL", "sqlite:///./test_paytrack.db")
os.environ.setdefault("PAYTRACK_SECRET_KEY", "test-secret-key")
