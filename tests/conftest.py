import os

# Keep the module-level schema bootstrap in app.py away from the working tree.
os.environ.setdefault("DATABASE_URL", "sqlite://")
