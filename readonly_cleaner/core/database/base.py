# File: readonly_cleaner/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Activity log models (Run, Failure) inherit from this.
Base = declarative_base()
