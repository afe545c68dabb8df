"""
Database initialization script.
"""
from exercise_tracker.core.config import settings
from exercise_tracker.db.session import create_db_engine, init_db

if __name__ == "__main__":
    print("Initializing database...")
    init_db(create_db_engine(settings))
    print("Database initialized successfully!")
